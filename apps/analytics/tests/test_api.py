import pytest
import uuid
from django.urls import reverse
from rest_framework import status

from apps.invoices.models import InvoiceStatus


@pytest.mark.django_db
class TestDailySummaryAPI:
    """Tests for GET /api/analytics/daily-summary"""

    def test_daily_summary(self, api_client, march_15_invoices):
        url = reverse('analytics:daily-summary')
        response = api_client.get(url, {'date': '2024-03-15'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {
            'date': '2024-03-15',
            'total_sales': '300.00',
            'invoice_count': 2,
            'paid_amount': '100.00',
            'pending_amount': '200.00',
        }

    def test_daily_summary_defaults_to_today(self, api_client):
        response = api_client.get(reverse('analytics:daily-summary'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['invoice_count'] == 0

    def test_daily_summary_bad_date(self, api_client):
        response = api_client.get(reverse('analytics:daily-summary'), {'date': '15/03/2024'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'].startswith('date:')


@pytest.mark.django_db
class TestLifetimeTotalAPI:
    """Tests for GET /api/analytics/customers/{id}/lifetime-total"""

    def test_lifetime_total(self, api_client, analytics_customer, make_invoice):
        make_invoice(analytics_customer, '120.00', InvoiceStatus.PAID)
        make_invoice(analytics_customer, '30.00', InvoiceStatus.CANCELLED)

        url = reverse(
            'analytics:customer-lifetime-total',
            kwargs={'customer_id': analytics_customer.id}
        )
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['lifetime_total'] == '150.00'
        assert response.data['invoice_count'] == 2

    def test_lifetime_total_unknown_customer(self, api_client):
        url = reverse('analytics:customer-lifetime-total', kwargs={'customer_id': uuid.uuid4()})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert 'error' in response.data
