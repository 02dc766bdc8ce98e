"""
Checkout orchestration: runs the fixed pricing sequence over a cart
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .pricing import (
    apply_discount,
    apply_special_discount,
    calculate_factorial,
    calculate_total,
    filter_prices,
    fixed_discount,
    special_discount_rate,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutResult:
    """
    Every intermediate and final value of one checkout run

    Attributes:
        original_prices: prices as loaded into the cart
        item_count: number of items in the original cart, before filtering
        filtered_prices: prices at or above the filter threshold (reported only)
        discounted_prices: prices after the standard discount
        standard_discount_rate: fraction taken off every item
        tax_rate: sales tax fraction
        filter_threshold: minimum price kept by the filter
        total_before_special: discounted subtotal plus tax
        factorial: factorial of the item count
        special_discount_rate: special discount percentage, already capped
        final_price: total after the special discount
    """
    original_prices: Tuple[float, ...]
    item_count: int
    filtered_prices: Tuple[float, ...]
    discounted_prices: Tuple[float, ...]
    standard_discount_rate: float
    tax_rate: float
    filter_threshold: float
    total_before_special: float
    factorial: int
    special_discount_rate: float
    final_price: float


class Checkout:
    """
    Runs the cart through filtering, discount, tax and the special discount
    """

    # Default cart configuration
    DEFAULT_PRICES = (5.50, 12.00, 8.75, 25.00, 4.99, 50.00)
    STANDARD_DISCOUNT_RATE = 0.10
    SALES_TAX_RATE = 0.05
    FILTER_THRESHOLD = 10.0
    SPECIAL_DISCOUNT_CAP = 50.0

    def __init__(
        self,
        prices: Optional[Sequence[float]] = None,
        standard_discount_rate: Optional[float] = None,
        tax_rate: Optional[float] = None,
        filter_threshold: Optional[float] = None,
        special_discount_cap: Optional[float] = None
    ):
        """
        Initialize the checkout
        Args:
            prices: item prices (uses DEFAULT_PRICES if None)
            standard_discount_rate: fraction off every item
            tax_rate: sales tax fraction
            filter_threshold: minimum price kept when filtering
            special_discount_cap: upper bound of the special discount percentage
        """
        self.prices = list(self.DEFAULT_PRICES if prices is None else prices)
        self.standard_discount_rate = (
            self.STANDARD_DISCOUNT_RATE if standard_discount_rate is None else standard_discount_rate
        )
        self.tax_rate = self.SALES_TAX_RATE if tax_rate is None else tax_rate
        self.filter_threshold = self.FILTER_THRESHOLD if filter_threshold is None else filter_threshold
        self.special_discount_cap = (
            self.SPECIAL_DISCOUNT_CAP if special_discount_cap is None else special_discount_cap
        )

    def run(self) -> CheckoutResult:
        """
        Run the full pricing sequence
        Returns the CheckoutResult holding every step's value
        """
        original_prices = list(self.prices)
        item_count = len(original_prices)
        logger.debug(f"Checking out {item_count} items: {original_prices}")

        filtered = filter_prices(original_prices, self.filter_threshold)
        logger.debug(f"Filtered items (>= {self.filter_threshold}): {filtered}")

        # The filtered list is only reported; the full cart is priced
        current_prices = list(original_prices)
        current_prices = apply_discount(current_prices, fixed_discount(self.standard_discount_rate))
        logger.debug(f"Discounted prices: {current_prices}")

        total_before_special = calculate_total(current_prices, self.tax_rate)

        factorial = calculate_factorial(item_count)
        special_rate = special_discount_rate(factorial, self.special_discount_cap)
        final_price = apply_special_discount(total_before_special, special_rate)
        logger.debug(
            f"Special discount {special_rate}% for {item_count} items, final price {final_price}"
        )

        return CheckoutResult(
            original_prices=tuple(original_prices),
            item_count=item_count,
            filtered_prices=tuple(filtered),
            discounted_prices=tuple(current_prices),
            standard_discount_rate=self.standard_discount_rate,
            tax_rate=self.tax_rate,
            filter_threshold=self.filter_threshold,
            total_before_special=total_before_special,
            factorial=factorial,
            special_discount_rate=special_rate,
            final_price=final_price,
        )
