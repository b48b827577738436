import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.customers.models import Customer
from apps.invoices.models import Invoice, InvoiceStatus
from apps.shop.models import ShopSettings


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def invoice_customer(db):
    """Create and return the customer invoices are issued to."""
    return Customer.objects.create(name='Priya Sharma', phone='9812345678')


@pytest.fixture
def shop(db):
    """Create and return shop settings with a full header."""
    return ShopSettings.objects.create(
        shop_name='Nazaara',
        address='Shop 4, Linking Road, Mumbai',
        phone='9820012345',
        gst_number='27ABCDE1234F1Z5',
        invoice_prefix='NZ-',
        last_invoice_number=7,
    )


@pytest.fixture
def invoice_items():
    """Two priced items and one zero-price row."""
    return [
        {'category': 'suit', 'description': 'Chanderi silk', 'quantity': 2, 'unit_price': '500'},
        {'category': 'jewellery', 'description': '', 'quantity': 1, 'unit_price': '250.50'},
        {'category': 'top', 'description': 'sample', 'quantity': 1, 'unit_price': '0'},
    ]


@pytest.fixture
def invoice(db, invoice_customer):
    """Create and return a stored invoice with a 10% discount."""
    return Invoice.objects.create(
        invoice_number='NZ-00007',
        customer=invoice_customer,
        customer_name=invoice_customer.name,
        customer_phone=invoice_customer.phone,
        status=InvoiceStatus.PENDING,
        items=[
            {
                'category': 'kurti',
                'description': 'Block print',
                'quantity': 2,
                'unit_price': '750.00',
                'line_total': '1500.00',
            },
        ],
        subtotal=Decimal('1500.00'),
        discount_type='percent',
        discount_value=Decimal('10.00'),
        discount_amount=Decimal('150.00'),
        total=Decimal('1350.00'),
    )
