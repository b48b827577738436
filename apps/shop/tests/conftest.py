import pytest
from rest_framework.test import APIClient
from apps.shop.models import ShopSettings


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def shop_settings(db):
    """Create and return a populated settings row."""
    return ShopSettings.objects.create(
        shop_name='Nazaara',
        address='Shop 4, Linking Road, Mumbai',
        phone='9820012345',
        gst_number='27ABCDE1234F1Z5',
        last_invoice_number=41,
    )
