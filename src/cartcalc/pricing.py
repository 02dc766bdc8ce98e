"""
Core price computations for the shopping cart
"""

import logging
from typing import Callable, List, Sequence

from .exceptions import EmptyCartError, InvalidItemCountError

logger = logging.getLogger(__name__)

# A unary price transform, e.g. a discount
PriceTransform = Callable[[float], float]


def calculate_total(prices: Sequence[float], tax_rate: float = 0.0) -> float:
    """
    Calculate the total cost of the items, optionally applying a tax rate

    Args:
        prices: item prices, must not be empty
        tax_rate: tax fraction to apply (0.05 for 5%), defaults to 0.0

    Returns the subtotal plus tax
    """
    if not prices:
        raise EmptyCartError("Cannot calculate a total for an empty cart")

    subtotal = sum(prices)
    tax_amount = subtotal * tax_rate
    logger.debug(f"Subtotal {subtotal} + tax {tax_amount} (rate {tax_rate})")
    return subtotal + tax_amount


def apply_discount(prices: Sequence[float], discount_function: PriceTransform) -> List[float]:
    """
    Apply a discount function to every price

    Args:
        prices: the original prices
        discount_function: maps one price to its discounted price

    Returns a new list with the same length and order
    """
    return [discount_function(price) for price in prices]


def calculate_factorial(n: int) -> int:
    """Recursively calculate n!"""
    if n < 0:
        raise InvalidItemCountError(f"Factorial is undefined for negative item count: {n}")
    if n <= 1:
        return 1
    return n * calculate_factorial(n - 1)


def filter_prices(prices: Sequence[float], threshold: float = 10.0) -> List[float]:
    """Keep the prices at or above the threshold, in order"""
    return [price for price in prices if price >= threshold]


def fixed_discount(rate: float) -> PriceTransform:
    """
    Build a transform that takes a fixed fraction off a price

    Args:
        rate: fraction to take off (0.10 for 10%)
    """
    def discount(price: float) -> float:
        return price * (1.0 - rate)

    return discount


def special_discount_rate(factorial: int, cap: float = 50.0) -> float:
    """
    Derive the special discount percentage from a factorial

    The percentage is factorial / 100, never more than cap
    """
    # Compare before dividing: factorials past 170! do not fit in a float
    if factorial > cap * 100:
        logger.debug(f"Special discount capped at {cap}%")
        return cap
    return factorial / 100.0


def apply_special_discount(total: float, rate_percent: float) -> float:
    """Take a percentage off a total"""
    return total * (1.0 - (rate_percent / 100.0))
