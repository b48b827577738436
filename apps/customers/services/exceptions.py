"""Domain-specific exceptions for customers services."""


class CustomersServiceError(Exception):
    """Base exception for customers services."""
    pass


class CustomerNotFoundError(CustomersServiceError):
    """Raised when a customer does not exist."""
    pass


class InvalidPhoneError(CustomersServiceError):
    """Raised when a phone number does not normalize to 10 digits."""
    pass


class DuplicatePhoneError(CustomersServiceError):
    """Raised when a phone number already belongs to another customer."""
    pass


class CustomerHasInvoicesError(CustomersServiceError):
    """Raised when deleting a customer that invoices still reference."""
    pass
