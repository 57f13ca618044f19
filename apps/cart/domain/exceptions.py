"""
Cart domain exceptions.
"""
from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)


class InvalidCartItemValueError(ValidationError):
    """Raised when a value written to a cart item fails its field check."""

    def __init__(self, field: str, expected: str, value=None):
        super().__init__(message=f"{field} must be {expected}", field=field)
        self.value = value


class AttributeNotSetError(EntityNotFoundError, KeyError):
    """Raised when reading a cart item attribute that was never set."""

    def __init__(self, key: str):
        super().__init__(
            entity_name="Cart item attribute",
            entity_id=key,
            code="CART_ITEM_ATTRIBUTE_NOT_SET",
        )
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise render the repr of the message
        return self.message


class UnhashableCartItemError(DomainException):
    """Raised when cart item data cannot be serialized for its identity."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Cart item data cannot be hashed: {reason}",
            code="UNHASHABLE_CART_ITEM"
        )
        self.reason = reason


__all__ = [
    'InvalidCartItemValueError',
    'AttributeNotSetError',
    'UnhashableCartItemError',
]
