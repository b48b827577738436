"""Domain-specific exceptions for invoice services."""


class InvoicesServiceError(Exception):
    """Base exception for invoice services."""
    pass


class InvoiceNotFoundError(InvoicesServiceError):
    """Raised when an invoice does not exist."""
    pass


class NoQualifyingItemsError(InvoicesServiceError):
    """Raised when an invoice has no item with a positive price."""
    pass


class InvoiceTotalsMismatchError(InvoicesServiceError):
    """Raised when client-sent totals disagree with the computed ones."""
    pass
