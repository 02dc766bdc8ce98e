__version__ = "0.1.0"

# Package metadata
__description__ = "Shopping cart total calculator with standard, tax and factorial discounts"

# Public API
from .pricing import (
    PriceTransform,
    calculate_total,
    apply_discount,
    calculate_factorial,
    filter_prices,
    fixed_discount,
    special_discount_rate,
    apply_special_discount
)
from .checkout import Checkout, CheckoutResult
from .formatter import CheckoutFormatter
from .exceptions import (
    CartError,
    EmptyCartError,
    InvalidItemCountError,
    FormattingError
)

__all__ = [
    # Version
    "__version__",

    # Pricing operations
    "PriceTransform",
    "calculate_total",
    "apply_discount",
    "calculate_factorial",
    "filter_prices",
    "fixed_discount",
    "special_discount_rate",
    "apply_special_discount",

    # Main classes
    "Checkout",
    "CheckoutFormatter",

    # Data classes
    "CheckoutResult",

    # Exceptions
    "CartError",
    "EmptyCartError",
    "InvalidItemCountError",
    "FormattingError"
]
