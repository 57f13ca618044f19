"""
Cart item id value object.
"""
import hashlib
import json
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Mapping

from shared.domain import ValueObject
from ..exceptions import UnhashableCartItemError

# Keys that may change without changing the identity of a line item
IGNORED_KEYS = ('quantity', 'variant')

# Reserved key marking a tagged Decimal in the canonical form
DECIMAL_TAG = '__decimal__'


def _tagged(value: Any) -> Any:
    """
    Prepare a value for json.

    Dict keys must be strings (json would otherwise stringify them and
    merge distinct keys) and Decimals are wrapped so they cannot be mistaken
    for plain strings.
    """
    if isinstance(value, dict):
        for key in value:
            if not isinstance(key, str):
                raise UnhashableCartItemError(f"key {key!r} is not a string")
            if key == DECIMAL_TAG:
                raise UnhashableCartItemError(f"key '{DECIMAL_TAG}' is reserved")
        return {k: _tagged(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_tagged(v) for v in value]
    if isinstance(value, Decimal):
        return {DECIMAL_TAG: str(value)}
    return value


def canonical_dumps(data: Mapping[str, Any]) -> str:
    """
    Serialize a mapping deterministically.

    Keys are sorted at every level, separators are compact and floats use
    their shortest round-trip repr, so equal content always yields the same
    text.
    """
    try:
        return json.dumps(
            _tagged(data),
            sort_keys=True,
            separators=(',', ':'),
            ensure_ascii=True,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise UnhashableCartItemError(str(e)) from e


@dataclass(frozen=True)
class CartItemId(ValueObject):
    """Content-derived identity of a cart line item."""
    value: str

    @classmethod
    def from_data(
        cls,
        data: Mapping[str, Any],
        ignore: Iterable[str] = IGNORED_KEYS,
    ) -> 'CartItemId':
        """Derive the id from the item data, skipping the ignored keys."""
        ignored = set(ignore)
        hash_data = {k: v for k, v in data.items() if k not in ignored}
        digest = hashlib.sha1(canonical_dumps(hash_data).encode('ascii'))
        return cls(value=digest.hexdigest())

    def __str__(self) -> str:
        return self.value
