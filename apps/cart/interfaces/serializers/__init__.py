# Serializers
from .cart_item_serializer import CartItemSerializer, CartItemInputSerializer

__all__ = ['CartItemSerializer', 'CartItemInputSerializer']
