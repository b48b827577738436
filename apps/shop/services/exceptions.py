"""Domain-specific exceptions for shop services."""


class ShopServiceError(Exception):
    """Base exception for shop services."""
    pass


class InvalidInvoiceSequenceError(ShopServiceError):
    """Raised when an update would move the invoice sequence backwards."""
    pass
