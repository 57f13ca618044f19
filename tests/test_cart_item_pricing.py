"""
Tests for cart item price and tax breakdown.
"""
import pytest

from apps.cart.domain.entities import CartItem
from apps.cart.domain.entities.cart_item import round_half_away_from_zero


class TestPriceBreakdown:

    def test_total_page_price(self, priced_item):
        assert priced_item.get_total_page_price() == 10.0

    def test_single_price(self, priced_item):
        assert priced_item.get_single_price() == 120.0

    def test_single_price_excluding_tax(self, priced_item):
        assert priced_item.get_single_price_excluding_tax() == 100.0

    def test_single_tax(self, priced_item):
        assert priced_item.get_single_tax() == 20.0

    def test_totals(self, priced_item):
        assert priced_item.get_total_price() == 360.0
        assert priced_item.get_total_price_excluding_tax() == 300.0
        assert priced_item.get_total_tax() == 60.0

    def test_results_are_floats(self, priced_item):
        assert isinstance(priced_item.get_total_page_price(), float)
        assert isinstance(priced_item.get_single_price_excluding_tax(), float)
        assert isinstance(priced_item.get_total_price(), float)

    def test_quantity_change_scales_totals(self, priced_item):
        priced_item.quantity = 1

        assert priced_item.get_total_price() == 120.0
        assert priced_item.get_total_tax() == 20.0

    def test_zero_tax(self):
        item = CartItem({'price': 49.5, 'quantity': 2})

        assert item.get_single_price_excluding_tax() == 50.0
        assert item.get_single_tax() == -0.5
        assert item.get_total_tax() == -1.0

    def test_default_item_is_free(self):
        item = CartItem()

        assert item.get_total_price() == 0.0
        assert item.get_total_tax() == 0.0

    def test_numeric_strings_from_construction_are_used(self):
        item = CartItem({'price': '10', 'tax': '25', 'quantity': 2})

        assert item.get_single_price_excluding_tax() == 8.0
        assert item.get_total_tax() == 4.0

    def test_excluding_tax_is_whole_number(self):
        item = CartItem({'price': 10, 'tax': 20})

        # 10 / 1.2 = 8.33...
        assert item.get_single_price_excluding_tax() == 8.0
        assert item.get_single_tax() == 2.0

    def test_full_tax_discount_divides_by_zero(self):
        item = CartItem({'price': 10, 'tax': -100})

        with pytest.raises(ZeroDivisionError):
            item.get_single_price_excluding_tax()


class TestRounding:

    @pytest.mark.parametrize('value, expected', [
        (0.5, 1.0),
        (1.5, 2.0),
        (2.5, 3.0),
        (-0.5, -1.0),
        (-2.5, -3.0),
        (2.4999, 2.0),
        (1.005, 1.0),
        (7.0, 7.0),
    ])
    def test_half_away_from_zero(self, value, expected):
        assert round_half_away_from_zero(value) == expected

    def test_non_finite_passes_through(self):
        assert round_half_away_from_zero(float('inf')) == float('inf')

    def test_tie_in_price(self):
        # 2.5 / 1.0 lands exactly on the tie
        item = CartItem({'price': 2.5})

        assert item.get_single_price_excluding_tax() == 3.0
