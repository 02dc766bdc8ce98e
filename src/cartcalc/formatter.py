"""
Rich text formatter for displaying checkout reports
"""

from typing import List, Optional, Sequence, Tuple
from rich.text import Text
from rich.console import Console, Group

from .checkout import CheckoutResult
from .exceptions import FormattingError


class CheckoutFormatter:
    """
    Formatter for checkout output with rich text features
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize the formatter
        """
        self.console = console or Console()

        # Styles for the different kinds of report lines
        self.styles = {
            "banner": "bold",
            "section": "bold cyan",
            "value": "",
            "total": "bold yellow",
            "final": "bold green",
        }

    def format_report(self, result: CheckoutResult) -> Group:
        """
        Format a complete checkout report
        Returns Rich Group object containing the formatted report
        """
        try:
            lines = [
                Text(content, style=self.styles[kind])
                for kind, content in self._report_lines(result)
            ]
            return Group(*lines)

        except Exception as e:
            raise FormattingError(f"Failed to format checkout report: {e}") from e

    def format_plain_report(self, result: CheckoutResult) -> str:
        """
        Format the checkout report as plain text (for logs and tests)
        """
        try:
            return "\n".join(content for _, content in self._report_lines(result))
        except Exception as e:
            raise FormattingError(f"Failed to format checkout report: {e}") from e

    def _report_lines(self, result: CheckoutResult) -> List[Tuple[str, str]]:
        """
        Build the report as (style kind, text) pairs, one per output line
        """
        discount_percent = self._format_percent(result.standard_discount_rate)

        return [
            ("banner", "🛒 Initializing Shopping Cart..."),
            ("value", f"Original Item Prices: {self._format_raw_prices(result.original_prices)}"),
            ("value", f"Total Items: {result.item_count}"),
            ("value", ""),
            ("section", f"--- Filtering Items (Price >= ${result.filter_threshold:g}) ---"),
            ("value", f"Filtered Items: {self._format_raw_prices(result.filtered_prices)}"),
            ("value", f"Proceeding with all {result.item_count} items."),
            ("value", ""),
            ("section", f"--- Applying Standard Discount ({discount_percent} Off) ---"),
            ("value", f"Prices After {discount_percent} Discount: "
                      f"{self._format_prices(result.discounted_prices)}"),
            ("value", ""),
            ("section", "--- Calculating Total Price ---"),
            ("value", f"Tax Rate: {self._format_percent(result.tax_rate)}"),
            ("total", f"Total After Standard Discount & Tax: "
                      f"{self._format_currency(result.total_before_special)}"),
            ("value", ""),
            ("section", "--- Applying Special Recursive Discount ---"),
            ("value", f"Items in Cart: {result.item_count}"),
            ("value", f"Factorial of Item Count ({result.item_count}!): {result.factorial}"),
            ("value", f"Special Discount Applied: {result.special_discount_rate:.2f}% Off"),
            ("final", f"Final Price After Special Discount: {self._format_currency(result.final_price)}"),
            ("value", ""),
            ("banner", "✅ Transaction Complete."),
        ]

    def _format_currency(self, amount: float) -> str:
        return f"${amount:.2f}"

    def _format_prices(self, prices: Sequence[float]) -> str:
        """Prices with two decimals, comma separated"""
        return ", ".join(self._format_currency(price) for price in prices)

    def _format_raw_prices(self, prices: Sequence[float]) -> str:
        """Prices in their shortest float form (5.5, 12.0)"""
        return ", ".join(f"${price}" for price in prices)

    def _format_percent(self, rate: float) -> str:
        """Fraction as a whole percentage (0.05 -> 5%)"""
        return f"{rate * 100:.0f}%"
