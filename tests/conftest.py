"""
Pytest configuration and fixtures.
"""
import pytest

from apps.cart.domain.entities import CartItem


@pytest.fixture
def item_data():
    """Attribute set for a fully configured line item."""
    return {
        'companyDesignId': 42,
        'pitchPrintProjectId': 7,
        'name': 'Business cards',
        'sku': 'BC-500',
        'quantity': 2,
        'price': 19.99,
        'colorPrice': 2.5,
        'pagePrice': 0.0,
        'tax': 20.0,
        'colorId': 3,
        'numEditPage': 0,
        'designAttributies': [{'key': 'font', 'value': 'Helvetica'}],
        'variantEntities': [{'id': 11, 'label': 'Matte'}],
        'variant': 'matte',
        'thumbnail': 'https://cdn.example.com/thumbs/bc-500.png',
    }


@pytest.fixture
def cart_item(item_data):
    """Create a configured cart item."""
    return CartItem(item_data)


@pytest.fixture
def priced_item():
    """Create an item with round numbers for price breakdown checks."""
    return CartItem({
        'price': 100,
        'colorPrice': 10,
        'pagePrice': 5,
        'numEditPage': 2,
        'tax': 20,
        'quantity': 3,
    })
