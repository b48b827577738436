import pytest
from rest_framework.test import APIClient
from apps.customers.models import Customer


@pytest.fixture
def api_client():
    """Return an API client (no API key configured in tests)."""
    return APIClient()


@pytest.fixture
def customer(db):
    """Create and return a test customer."""
    return Customer.objects.create(
        name='Asha Verma',
        phone='9876543210',
        email='asha@example.com',
        address='12 MG Road, Pune',
    )


@pytest.fixture
def other_customer(db):
    """Create and return another test customer."""
    return Customer.objects.create(
        name='Rahul Mehta',
        phone='9123456780',
    )
