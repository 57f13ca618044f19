# Value objects
from .cart_item_id import CartItemId, canonical_dumps, IGNORED_KEYS

__all__ = ['CartItemId', 'canonical_dumps', 'IGNORED_KEYS']
