"""
Customers app services layer.

Views stay thin; all validation of phone numbers and uniqueness lives here.
"""

from .exceptions import (
    CustomersServiceError,
    CustomerNotFoundError,
    InvalidPhoneError,
    DuplicatePhoneError,
    CustomerHasInvoicesError,
)

from .customer_management import (
    normalize_phone,
    list_customers,
    get_customer_by_id,
    get_customer_by_phone,
    create_customer,
    update_customer,
    delete_customer,
)


__all__ = [
    # Exceptions
    'CustomersServiceError',
    'CustomerNotFoundError',
    'InvalidPhoneError',
    'DuplicatePhoneError',
    'CustomerHasInvoicesError',

    # Customer Management
    'normalize_phone',
    'list_customers',
    'get_customer_by_id',
    'get_customer_by_phone',
    'create_customer',
    'update_customer',
    'delete_customer',
]
