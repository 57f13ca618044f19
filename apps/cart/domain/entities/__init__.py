# Domain entities
from .cart_item import CartItem, DEFAULTS, PRICE_FIELDS

__all__ = ['CartItem', 'DEFAULTS', 'PRICE_FIELDS']
