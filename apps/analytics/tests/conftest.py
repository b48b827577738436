import pytest
from datetime import datetime
from decimal import Decimal

from django.utils import timezone
from rest_framework.test import APIClient

from apps.customers.models import Customer
from apps.invoices.models import Invoice, InvoiceStatus


@pytest.fixture
def api_client():
    """Return an API client."""
    return APIClient()


@pytest.fixture
def analytics_customer(db):
    return Customer.objects.create(name='Sunita Desai', phone='9988001122')


@pytest.fixture
def analytics_other_customer(db):
    return Customer.objects.create(name='Farhan Ali', phone='9090909090')


@pytest.fixture
def make_invoice(db):
    """
    Factory for invoices with a chosen total, status and creation time.

    ``created_at`` is set with an UPDATE since ``auto_now_add`` ignores
    values passed on create.
    """
    counter = {'n': 0}

    def _make(customer, total, status=InvoiceStatus.PENDING, created_at=None, number=None):
        counter['n'] += 1
        invoice = Invoice.objects.create(
            invoice_number=number or f"NZ-{counter['n']:05d}",
            customer=customer,
            customer_name=customer.name,
            customer_phone=customer.phone,
            status=status,
            subtotal=Decimal(total),
            total=Decimal(total),
        )
        if created_at is not None:
            Invoice.objects.filter(pk=invoice.pk).update(created_at=created_at)
            invoice.refresh_from_db()
        return invoice

    return _make


def at(year, month, day, hour=12, minute=0):
    """Aware datetime in the current time zone."""
    return timezone.make_aware(datetime(year, month, day, hour, minute))


@pytest.fixture
def march_15_invoices(analytics_customer, make_invoice):
    """100 paid, 200 pending and 50 cancelled on 2024-03-15, plus noise on other days."""
    return [
        make_invoice(analytics_customer, '100.00', InvoiceStatus.PAID, at(2024, 3, 15, 9)),
        make_invoice(analytics_customer, '200.00', InvoiceStatus.PENDING, at(2024, 3, 15, 13)),
        make_invoice(analytics_customer, '50.00', InvoiceStatus.CANCELLED, at(2024, 3, 15, 18)),
        make_invoice(analytics_customer, '999.00', InvoiceStatus.PAID, at(2024, 3, 14, 23, 59)),
        make_invoice(analytics_customer, '888.00', InvoiceStatus.PENDING, at(2024, 3, 16, 0, 1)),
    ]
