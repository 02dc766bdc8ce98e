"""
Custom exceptions
"""


class CartError(Exception):
    """Base exception"""
    pass


class EmptyCartError(CartError):
    """Totals requested over a cart with no prices"""
    pass


class InvalidItemCountError(CartError):
    """Item counts that cannot feed the factorial discount"""
    pass


class FormattingError(CartError):
    """Issues formatting output"""
    pass
