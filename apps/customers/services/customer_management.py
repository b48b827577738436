"""Customer CRUD operations service."""

import logging
import re
from typing import Optional, Dict, Any
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction, IntegrityError
from django.db.models import Q, ProtectedError, QuerySet

from ..models import Customer
from .exceptions import (
    CustomerNotFoundError,
    InvalidPhoneError,
    DuplicatePhoneError,
    CustomerHasInvoicesError,
)

logger = logging.getLogger(__name__)

PHONE_DIGITS = 10

DUPLICATE_PHONE_MESSAGE = "A customer with this phone number already exists"


def normalize_phone(phone: str) -> str:
    """
    Strip everything but digits and require exactly 10 of them.

    Raises:
        InvalidPhoneError: If the result is not a 10-digit number
    """
    digits = re.sub(r'\D', '', phone or '')
    if len(digits) != PHONE_DIGITS:
        raise InvalidPhoneError("Please enter a valid 10-digit phone number")
    return digits


def list_customers(*, search: Optional[str] = None) -> QuerySet:
    """Return customers newest first, optionally filtered by name/phone."""
    queryset = Customer.objects.all()

    if search:
        search = search.strip()
        queryset = queryset.filter(
            Q(name__icontains=search) | Q(phone__icontains=search)
        )

    return queryset.order_by('-created_at')


def get_customer_by_id(*, customer_id: UUID) -> Customer:
    """
    Get customer by ID.

    Raises:
        CustomerNotFoundError: If customer doesn't exist
    """
    try:
        return Customer.objects.get(id=customer_id)
    except (Customer.DoesNotExist, DjangoValidationError, ValueError):
        raise CustomerNotFoundError(f"Customer {customer_id} not found")


def get_customer_by_phone(*, phone: str) -> Optional[Customer]:
    """Look a customer up by phone. Returns None when absent or malformed."""
    try:
        normalized = normalize_phone(phone)
    except InvalidPhoneError:
        return None
    return Customer.objects.filter(phone=normalized).first()


def _ensure_phone_available(phone: str, exclude_id: Optional[UUID] = None) -> None:
    queryset = Customer.objects.filter(phone=phone)
    if exclude_id is not None:
        queryset = queryset.exclude(id=exclude_id)
    if queryset.exists():
        raise DuplicatePhoneError(DUPLICATE_PHONE_MESSAGE)


@transaction.atomic
def create_customer(
    *,
    name: str,
    phone: str,
    email: str = '',
    address: str = '',
    notes: str = ''
) -> Customer:
    """
    Create a new customer.

    Args:
        name: Customer name
        phone: Phone number in any format; stored as 10 digits
        email: Optional email
        address: Optional postal address
        notes: Optional free-text notes

    Returns:
        Created Customer instance

    Raises:
        InvalidPhoneError: If phone is not a 10-digit number
        DuplicatePhoneError: If phone already belongs to a customer
    """
    normalized = normalize_phone(phone)
    _ensure_phone_available(normalized)

    try:
        customer = Customer.objects.create(
            name=name.strip(),
            phone=normalized,
            email=email or '',
            address=address or '',
            notes=notes or '',
        )
    except IntegrityError:
        # Lost a race with a concurrent create for the same phone
        raise DuplicatePhoneError(DUPLICATE_PHONE_MESSAGE)

    logger.info("Created customer %s (%s)", customer.id, customer.phone)
    return customer


@transaction.atomic
def update_customer(
    *,
    customer_id: UUID,
    data: Dict[str, Any]
) -> Customer:
    """
    Update an existing customer with the given fields only.

    Args:
        customer_id: Customer UUID
        data: Fields to update

    Returns:
        Updated Customer instance

    Raises:
        CustomerNotFoundError: If customer doesn't exist
        InvalidPhoneError: If a new phone is malformed
        DuplicatePhoneError: If a new phone belongs to another customer
    """
    try:
        customer = (
            Customer.objects
            .select_for_update()
            .get(id=customer_id)
        )
    except (Customer.DoesNotExist, DjangoValidationError, ValueError):
        raise CustomerNotFoundError(f"Customer {customer_id} not found")

    allowed_fields = ['name', 'phone', 'email', 'address', 'notes']

    for field, value in data.items():
        if field not in allowed_fields:
            continue
        if field == 'phone':
            value = normalize_phone(value)
            _ensure_phone_available(value, exclude_id=customer.id)
        elif field == 'name':
            value = value.strip()
        elif value is None:
            value = ''
        setattr(customer, field, value)

    try:
        customer.save()
    except IntegrityError:
        raise DuplicatePhoneError(DUPLICATE_PHONE_MESSAGE)

    return customer


@transaction.atomic
def delete_customer(*, customer_id: UUID) -> None:
    """
    Delete a customer that no invoice references.

    Raises:
        CustomerNotFoundError: If customer doesn't exist
        CustomerHasInvoicesError: If any invoice references the customer
    """
    try:
        customer = (
            Customer.objects
            .select_for_update()
            .get(id=customer_id)
        )
    except (Customer.DoesNotExist, DjangoValidationError, ValueError):
        raise CustomerNotFoundError(f"Customer {customer_id} not found")

    invoice_count = customer.invoices.count()
    if invoice_count:
        raise CustomerHasInvoicesError(
            f"Cannot delete customer: {invoice_count} invoice(s) reference this customer"
        )

    try:
        customer.delete()
    except ProtectedError as e:
        blocking = len(e.protected_objects)
        raise CustomerHasInvoicesError(
            f"Cannot delete customer: {blocking} invoice(s) reference this customer"
        )

    logger.info("Deleted customer %s", customer_id)
