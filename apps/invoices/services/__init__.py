"""Services for invoice business logic."""

from .exceptions import (
    InvoicesServiceError,
    InvoiceNotFoundError,
    NoQualifyingItemsError,
    InvoiceTotalsMismatchError,
)
from .calculator import (
    parse_amount,
    parse_quantity,
    compute_line_total,
    qualifying_items,
    compute_discount_amount,
    compute_invoice_totals,
)
from .numbering import (
    format_invoice_number,
    allocate_invoice_number,
)
from .invoice_management import (
    get_invoice_by_id,
    list_invoices_by_customer,
    create_invoice,
    update_invoice,
    delete_invoice,
)
from .documents import (
    format_currency,
    generate_invoice_message,
    whatsapp_phone,
    build_whatsapp_link,
)

__all__ = [
    # Exceptions
    'InvoicesServiceError',
    'InvoiceNotFoundError',
    'NoQualifyingItemsError',
    'InvoiceTotalsMismatchError',
    # Calculator
    'parse_amount',
    'parse_quantity',
    'compute_line_total',
    'qualifying_items',
    'compute_discount_amount',
    'compute_invoice_totals',
    # Numbering
    'format_invoice_number',
    'allocate_invoice_number',
    # CRUD
    'get_invoice_by_id',
    'list_invoices_by_customer',
    'create_invoice',
    'update_invoice',
    'delete_invoice',
    # Sharing
    'format_currency',
    'generate_invoice_message',
    'whatsapp_phone',
    'build_whatsapp_link',
]
