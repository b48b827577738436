"""Invoice CRUD operations service."""

import logging
from decimal import Decimal
from typing import Optional, Dict, Any, List
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import QuerySet

from apps.customers.services import get_customer_by_id
from ..models import Invoice, DiscountType, InvoiceStatus
from .calculator import compute_invoice_totals, CENT
from .numbering import allocate_invoice_number
from .exceptions import (
    InvoiceNotFoundError,
    NoQualifyingItemsError,
    InvoiceTotalsMismatchError,
)

logger = logging.getLogger(__name__)

NO_ITEMS_MESSAGE = "Please add at least one item with a price"


def _serialize_items(items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Convert calculator items to JSON-safe dicts (money as strings)."""
    return [
        {
            'category': item['category'],
            'description': item['description'],
            'quantity': item['quantity'],
            'unit_price': str(item['unit_price']),
            'line_total': str(item['line_total']),
        }
        for item in items
    ]


def _check_client_totals(totals: Dict[str, Any], client_totals: Optional[Dict[str, Any]]) -> None:
    if not client_totals:
        return
    for field in ('subtotal', 'total'):
        sent = client_totals.get(field)
        if sent is None:
            continue
        if abs(Decimal(sent) - totals[field]) > CENT:
            raise InvoiceTotalsMismatchError(
                f"Submitted {field} {sent} does not match computed {field} {totals[field]}"
            )


def _compute_totals(items, discount_type, discount_value, client_totals):
    totals = compute_invoice_totals(items, discount_type, discount_value)
    if not totals['items']:
        raise NoQualifyingItemsError(NO_ITEMS_MESSAGE)
    _check_client_totals(totals, client_totals)
    return totals


def get_invoice_by_id(*, invoice_id: UUID) -> Invoice:
    """
    Get invoice by ID.

    Raises:
        InvoiceNotFoundError: If invoice doesn't exist
    """
    try:
        return Invoice.objects.get(id=invoice_id)
    except (Invoice.DoesNotExist, DjangoValidationError, ValueError):
        raise InvoiceNotFoundError(f"Invoice {invoice_id} not found")


def list_invoices_by_customer(*, customer_id: UUID) -> QuerySet:
    """Return a customer's invoices newest first."""
    customer = get_customer_by_id(customer_id=customer_id)
    return Invoice.objects.filter(customer=customer).order_by('-created_at')


@transaction.atomic
def create_invoice(
    *,
    customer_id: UUID,
    items: List[Dict[str, Any]],
    status: str = InvoiceStatus.PENDING,
    discount_type: str = DiscountType.PERCENT,
    discount_value: Decimal = Decimal('0.00'),
    notes: str = '',
    client_totals: Optional[Dict[str, Any]] = None
) -> Invoice:
    """
    Create an invoice with server-computed totals and the next number.

    The customer's current name and phone are copied onto the invoice.
    Allocation and insert share this transaction, so a failed insert
    leaves the counter untouched.

    Args:
        customer_id: Existing customer UUID
        items: Line items (category, description, quantity, unit_price)
        status: Initial status
        discount_type: 'percent' or 'fixed'
        discount_value: Discount percentage or amount
        notes: Free-text notes
        client_totals: Optional subtotal/total as computed by the client

    Returns:
        Created Invoice instance

    Raises:
        CustomerNotFoundError: If the customer doesn't exist
        NoQualifyingItemsError: If no item has a positive price
        InvoiceTotalsMismatchError: If client totals differ by more than 0.01
    """
    customer = get_customer_by_id(customer_id=customer_id)
    totals = _compute_totals(items, discount_type, discount_value, client_totals)

    invoice = Invoice.objects.create(
        invoice_number=allocate_invoice_number(),
        customer=customer,
        customer_name=customer.name,
        customer_phone=customer.phone,
        status=status,
        items=_serialize_items(totals['items']),
        subtotal=totals['subtotal'],
        discount_type=discount_type,
        discount_value=discount_value,
        discount_amount=totals['discount_amount'],
        total=totals['total'],
        notes=notes or '',
    )

    logger.info(
        "Created invoice %s for customer %s, total %s",
        invoice.invoice_number, customer.id, invoice.total
    )
    return invoice


@transaction.atomic
def update_invoice(
    *,
    invoice_id: UUID,
    data: Dict[str, Any],
    client_totals: Optional[Dict[str, Any]] = None
) -> Invoice:
    """
    Update an invoice with the given fields only.

    The invoice number and customer snapshot never change. Totals are
    recomputed when items or discount fields are part of the update;
    a status or notes change leaves them as they are.

    Raises:
        InvoiceNotFoundError: If invoice doesn't exist
        NoQualifyingItemsError: If new items have no positive price
        InvoiceTotalsMismatchError: If client totals differ by more than 0.01
    """
    try:
        invoice = Invoice.objects.select_for_update().get(id=invoice_id)
    except (Invoice.DoesNotExist, DjangoValidationError, ValueError):
        raise InvoiceNotFoundError(f"Invoice {invoice_id} not found")

    if 'status' in data:
        invoice.status = data['status']
    if 'notes' in data:
        invoice.notes = data['notes'] or ''

    pricing_fields = {'items', 'discount_type', 'discount_value'}
    if pricing_fields & set(data):
        invoice.discount_type = data.get('discount_type', invoice.discount_type)
        invoice.discount_value = data.get('discount_value', invoice.discount_value)
        items = data.get('items', invoice.items)

        totals = _compute_totals(items, invoice.discount_type, invoice.discount_value, client_totals)
        invoice.items = _serialize_items(totals['items'])
        invoice.subtotal = totals['subtotal']
        invoice.discount_amount = totals['discount_amount']
        invoice.total = totals['total']
    else:
        _check_client_totals(
            {'subtotal': invoice.subtotal, 'total': invoice.total},
            client_totals
        )

    invoice.save()
    return invoice


@transaction.atomic
def delete_invoice(*, invoice_id: UUID) -> None:
    """
    Delete an invoice. The customer is not affected.

    Raises:
        InvoiceNotFoundError: If invoice doesn't exist
    """
    invoice = get_invoice_by_id(invoice_id=invoice_id)
    invoice_number = invoice.invoice_number
    invoice.delete()
    logger.info("Deleted invoice %s", invoice_number)
