"""
Tests for the checkout orchestration
"""

import dataclasses
import math

import pytest

from cartcalc.checkout import Checkout, CheckoutResult
from cartcalc.exceptions import EmptyCartError


class TestCheckout:
    """Test cases for Checkout class"""

    def setup_method(self):
        """Set up test fixtures"""
        self.checkout = Checkout()
        self.result = self.checkout.run()

    def test_defaults(self):
        """Test the default cart configuration"""
        assert self.checkout.prices == [5.50, 12.00, 8.75, 25.00, 4.99, 50.00]
        assert self.checkout.standard_discount_rate == 0.10
        assert self.checkout.tax_rate == 0.05
        assert self.checkout.filter_threshold == 10.0
        assert self.checkout.special_discount_cap == 50.0

    def test_result_type(self):
        """Test that run returns a CheckoutResult"""
        assert isinstance(self.result, CheckoutResult)

    def test_item_count_and_filter(self):
        """Test item count and the reported filter"""
        assert self.result.item_count == 6
        assert self.result.filtered_prices == (12.00, 25.00, 50.00)

    def test_standard_discount(self):
        """Test every item gets 10% off"""
        expected = (4.95, 10.80, 7.875, 22.50, 4.491, 45.00)
        assert self.result.discounted_prices == pytest.approx(expected)

    def test_total_with_tax(self):
        """Test subtotal 95.616 plus 5% tax"""
        assert self.result.total_before_special == pytest.approx(100.3968)

    def test_special_discount(self):
        """Test 6! = 720 gives a 7.2% special discount"""
        assert self.result.factorial == 720
        assert self.result.special_discount_rate == pytest.approx(7.2)

    def test_final_price(self):
        """Test the final price"""
        assert self.result.final_price == pytest.approx(93.1682304)
        assert f"{self.result.final_price:.2f}" == "93.17"

    def test_original_prices_untouched(self):
        """Test the run does not modify the cart"""
        assert self.result.original_prices == (5.50, 12.00, 8.75, 25.00, 4.99, 50.00)
        assert self.checkout.prices == [5.50, 12.00, 8.75, 25.00, 4.99, 50.00]

    def test_item_count_uses_original_cart(self):
        """Test the factorial uses the count before filtering"""
        result = Checkout(prices=[1.0, 2.0, 3.0, 20.0]).run()
        assert len(result.filtered_prices) == 1
        assert result.factorial == 24

    def test_special_discount_capped(self):
        """Test a large cart hits the 50% cap"""
        result = Checkout(prices=[10.0] * 8).run()
        assert result.factorial == 40320
        assert result.special_discount_rate == 50.0
        assert result.final_price == pytest.approx(result.total_before_special * 0.5)

    def test_special_discount_capped_for_huge_factorial(self):
        """Test a cart whose factorial does not fit in a float still hits the cap"""
        result = Checkout(prices=[1.0] * 171).run()
        assert result.factorial == math.factorial(171)
        assert result.special_discount_rate == 50.0
        assert result.final_price == pytest.approx(result.total_before_special * 0.5)

    def test_result_is_immutable(self):
        """Test the result holds tuples and rejects assignment"""
        assert isinstance(self.result.discounted_prices, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            self.result.final_price = 0.0

    def test_custom_rates(self):
        """Test constructor overrides"""
        result = Checkout(prices=[100.0], standard_discount_rate=0.5, tax_rate=0.1).run()
        assert result.discounted_prices == pytest.approx((50.0,))
        assert result.total_before_special == pytest.approx(55.0)
        assert result.special_discount_rate == pytest.approx(0.01)

    def test_empty_cart(self):
        """Test that an empty cart cannot be checked out"""
        with pytest.raises(EmptyCartError):
            Checkout(prices=[]).run()
