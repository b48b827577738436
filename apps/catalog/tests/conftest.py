import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.catalog.models import Category, Product


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def category(db):
    """Create and return a custom category."""
    return Category.objects.create(
        category_id='dupatta',
        label='Dupatta',
        icon='wind',
        sort_order=10,
    )


@pytest.fixture
def product(db):
    """Create and return a test product."""
    return Product.objects.create(
        name='Cotton Kurti',
        category='kurti',
        default_price=Decimal('799.00'),
    )
