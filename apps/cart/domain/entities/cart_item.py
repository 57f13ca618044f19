"""
Cart item entity.
"""
import copy
import logging
import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterator, Mapping, Optional

from ..exceptions import AttributeNotSetError, InvalidCartItemValueError
from ..value_objects import CartItemId

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    'companyDesignId': None,
    'pitchPrintProjectId': None,
    'name': '',
    'sku': '',
    'quantity': 1,
    'price': 0.0,
    'colorPrice': 0.0,
    'pagePrice': 0.0,
    'tax': 0.0,
    'colorId': None,
    'numEditPage': 0,
    'designAttributies': [],
    'variantEntities': [],
    'variant': '',
    'thumbnail': '',
}

PRICE_FIELDS = ('price', 'colorPrice', 'pagePrice', 'tax')

_NUMERIC_STRING = re.compile(
    r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$',
    re.ASCII,
)


def is_numeric(value: Any) -> bool:
    """Check for a number or a plain decimal numeric string."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return True
    if isinstance(value, str):
        return bool(_NUMERIC_STRING.match(value))
    return False


def round_half_away_from_zero(value: float) -> float:
    """Round to a whole number, ties going away from zero (2.5 -> 3, -2.5 -> -3)."""
    if not math.isfinite(value):
        return value
    return float(Decimal(repr(value)).to_integral_value(rounding=ROUND_HALF_UP))


class CartItem:
    """
    One configured product line in a cart.

    Attributes live in a single mapping and are reachable both as keys
    (``item['price']``) and as attributes (``item.price``); every write goes
    through ``set`` so validation cannot be bypassed. The id is derived from
    the content, ignoring ``quantity`` and ``variant``.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        merged = dict(DEFAULTS)
        merged.update(data or {})
        object.__setattr__(self, '_data', copy.deepcopy(merged))

    @classmethod
    def from_array(cls, payload: Mapping[str, Any]) -> 'CartItem':
        """Rebuild an item from the output of ``to_array``."""
        return cls(payload['data'])

    # Accessor core

    def get(self, key: str) -> Any:
        """Get a piece of data set on the item; ``'id'`` is always derived."""
        if key == 'id':
            return self.get_id()
        try:
            return self._data[key]
        except KeyError:
            raise AttributeNotSetError(key) from None

    def set(self, key: str, value: Any) -> str:
        """Validate and store a value, returning the recomputed id."""
        value = self._clean(key, value)
        candidate = dict(self._data)
        candidate[key] = value
        item_id = CartItemId.from_data(candidate).value
        self._data[key] = value
        logger.debug(f"Cart item '{key}' updated, id is now {item_id}")
        return item_id

    def delete(self, key: str) -> None:
        """Remove a piece of data; absent keys are ignored."""
        self._data.pop(key, None)

    def has(self, key: str) -> bool:
        """Check whether a key is stored (a None value still counts)."""
        return key in self._data

    def _clean(self, key: str, value: Any) -> Any:
        """Check a value against its field rule and coerce it if needed."""
        if key == 'quantity':
            if isinstance(value, bool) or not isinstance(value, int):
                self._reject(key, 'an integer', value)
        elif key == 'variant':
            if not isinstance(value, str):
                self._reject(key, 'a string', value)
        elif key in PRICE_FIELDS:
            if not is_numeric(value):
                self._reject(key, 'numeric', value)
            try:
                value = float(value)
            except OverflowError:
                self._reject(key, 'numeric', value)
        return value

    @staticmethod
    def _reject(key: str, expected: str, value: Any) -> None:
        logger.warning(f"Rejected cart item value for '{key}': {value!r}")
        raise InvalidCartItemValueError(field=key, expected=expected, value=value)

    # Identity

    def get_id(self) -> str:
        """Get the content-derived id as a lowercase hex digest."""
        return CartItemId.from_data(self._data).value

    # Pricing

    def _number(self, key: str) -> float:
        return float(self.get(key))

    def get_total_page_price(self) -> float:
        """Get the surcharge for all editable pages."""
        return self._number('pagePrice') * self._number('numEditPage')

    def get_single_price(self) -> float:
        """Get the unit price including tax."""
        return (
            self._number('price')
            + self._number('colorPrice')
            + self.get_total_page_price()
        )

    def get_single_price_excluding_tax(self) -> float:
        """Get the unit price excluding tax, rounded to a whole number."""
        net = self.get_single_price() / (1 + self._number('tax') / 100)
        return round_half_away_from_zero(net)

    def get_single_tax(self) -> float:
        """Get the tax portion of the unit price."""
        return self.get_single_price() - self.get_single_price_excluding_tax()

    def get_total_price(self) -> float:
        """Get the line total including tax."""
        return self.get_single_price() * self._number('quantity')

    def get_total_price_excluding_tax(self) -> float:
        """Get the line total excluding tax."""
        return self.get_single_price_excluding_tax() * self._number('quantity')

    def get_total_tax(self) -> float:
        """Get the tax for the whole line."""
        return self.get_single_tax() * self._number('quantity')

    # Export

    def to_array(self) -> Dict[str, Any]:
        """Export the item as ``{'id': ..., 'data': {...}}``."""
        return {
            'id': self.get_id(),
            'data': copy.deepcopy(self._data),
        }

    # Container access

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self.delete(key)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return True

    # Attribute access; names starting with '_' belong to the object itself

    def __getattr__(self, key: str) -> Any:
        if key.startswith('_'):
            raise AttributeError(key)
        try:
            return self.get(key)
        except AttributeNotSetError as e:
            raise AttributeError(
                f"'{type(self).__name__}' has no attribute '{key}'"
            ) from e

    def __setattr__(self, key: str, value: Any) -> None:
        if key.startswith('_'):
            object.__setattr__(self, key, value)
        else:
            self.set(key, value)

    def __delattr__(self, key: str) -> None:
        if key.startswith('_'):
            object.__delattr__(self, key)
        else:
            self.delete(key)

    def __repr__(self) -> str:
        return (
            f"CartItem(sku={self._data.get('sku')!r}, "
            f"quantity={self._data.get('quantity')!r})"
        )
