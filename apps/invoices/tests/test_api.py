import pytest
import uuid
from datetime import timedelta
from decimal import Decimal
from urllib.parse import unquote

from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from apps.customers.models import Customer
from apps.invoices.models import Invoice


def _create_payload(customer, **overrides):
    payload = {
        'customer_id': str(customer.id),
        'items': [
            {'category': 'suit', 'description': 'Anarkali', 'quantity': 2, 'unit_price': '500'},
            {'category': 'top', 'quantity': 1, 'unit_price': '0'},
        ],
        'discount_type': 'percent',
        'discount_value': '0',
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
class TestInvoiceCreate:
    """Tests for POST /api/invoices"""

    def test_round_trip_drops_zero_price_items(self, api_client, shop, invoice_customer):
        url = reverse('invoices:invoice-list')
        response = api_client.post(url, _create_payload(invoice_customer), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['subtotal'] == '1000.00'
        assert response.data['total'] == '1000.00'
        assert len(response.data['items']) == 1
        assert response.data['invoice_number'] == 'NZ-00008'
        assert response.data['customer_name'] == 'Priya Sharma'

        detail = api_client.get(
            reverse('invoices:invoice-detail', kwargs={'pk': response.data['id']})
        )
        assert detail.status_code == status.HTTP_200_OK
        assert detail.data['subtotal'] == '1000.00'
        assert detail.data['total'] == '1000.00'

    def test_create_with_client_totals_mismatch(self, api_client, shop, invoice_customer):
        url = reverse('invoices:invoice-list')
        response = api_client.post(
            url,
            _create_payload(invoice_customer, subtotal='1000.00', total='900.00'),
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'does not match' in response.data['error']

    def test_create_without_priced_items(self, api_client, shop, invoice_customer):
        url = reverse('invoices:invoice-list')
        response = api_client.post(
            url,
            _create_payload(invoice_customer, items=[{'category': 'top', 'quantity': 1, 'unit_price': '0'}]),
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Please add at least one item with a price'

    def test_create_unknown_customer(self, api_client, shop):
        url = reverse('invoices:invoice-list')
        response = api_client.post(url, {
            'customer_id': str(uuid.uuid4()),
            'items': [{'category': 'suit', 'quantity': 1, 'unit_price': '10'}],
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_rejects_negative_price(self, api_client, shop, invoice_customer):
        url = reverse('invoices:invoice-list')
        response = api_client.post(
            url,
            _create_payload(invoice_customer, items=[{'category': 'suit', 'quantity': 1, 'unit_price': '-10'}]),
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'items' in response.data['details']


@pytest.mark.django_db
class TestInvoiceList:
    """Tests for GET /api/invoices"""

    def _make(self, customer, number, status_value='pending', days_ago=0):
        invoice = Invoice.objects.create(
            invoice_number=number,
            customer=customer,
            customer_name=customer.name,
            customer_phone=customer.phone,
            status=status_value,
            total=Decimal('100.00'),
        )
        if days_ago:
            Invoice.objects.filter(pk=invoice.pk).update(
                created_at=timezone.now() - timedelta(days=days_ago)
            )
        return invoice

    def test_list_newest_first(self, api_client, invoice_customer):
        self._make(invoice_customer, 'NZ-00001', days_ago=3)
        self._make(invoice_customer, 'NZ-00002')

        response = api_client.get(reverse('invoices:invoice-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [i['invoice_number'] for i in response.data] == ['NZ-00002', 'NZ-00001']

    def test_list_filters_combine(self, api_client, invoice_customer):
        other = Customer.objects.create(name='Anil Kumar', phone='9700000000')
        self._make(invoice_customer, 'NZ-00001', status_value='paid')
        self._make(invoice_customer, 'NZ-00002', status_value='pending')
        self._make(other, 'NZ-00003', status_value='paid')
        self._make(invoice_customer, 'NZ-00004', status_value='paid', days_ago=40)

        response = api_client.get(reverse('invoices:invoice-list'), {
            'search': 'priya',
            'status': 'paid',
            'range': 'month',
        })

        assert response.status_code == status.HTTP_200_OK
        assert [i['invoice_number'] for i in response.data] == ['NZ-00001']

    def test_list_invalid_custom_range(self, api_client):
        response = api_client.get(reverse('invoices:invoice-list'), {
            'range': 'custom',
            'date_from': '2024-03-20',
            'date_to': '2024-03-10',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_list_unknown_status(self, api_client):
        response = api_client.get(reverse('invoices:invoice-list'), {'status': 'refunded'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestInvoiceDetail:
    """Tests for GET/PUT/DELETE /api/invoices/{id}"""

    def test_update_status(self, api_client, invoice):
        url = reverse('invoices:invoice-detail', kwargs={'pk': invoice.id})
        response = api_client.put(url, {'status': 'paid'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'paid'
        assert response.data['total'] == '1350.00'
        assert response.data['invoice_number'] == 'NZ-00007'

    def test_update_items(self, api_client, invoice):
        url = reverse('invoices:invoice-detail', kwargs={'pk': invoice.id})
        response = api_client.patch(url, {
            'items': [{'category': 'pants', 'quantity': 3, 'unit_price': '400'}],
            'discount_type': 'fixed',
            'discount_value': '100',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['subtotal'] == '1200.00'
        assert response.data['discount_amount'] == '100.00'
        assert response.data['total'] == '1100.00'

    def test_update_not_found(self, api_client):
        url = reverse('invoices:invoice-detail', kwargs={'pk': uuid.uuid4()})
        response = api_client.put(url, {'status': 'paid'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_invoice(self, api_client, invoice):
        url = reverse('invoices:invoice-detail', kwargs={'pk': invoice.id})
        response = api_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Invoice.objects.filter(id=invoice.id).exists()

    def test_customer_delete_blocked_then_allowed(self, api_client, invoice, invoice_customer):
        customer_url = reverse('customers:customer-detail', kwargs={'pk': invoice_customer.id})

        blocked = api_client.delete(customer_url)
        assert blocked.status_code == status.HTTP_400_BAD_REQUEST

        api_client.delete(reverse('invoices:invoice-detail', kwargs={'pk': invoice.id}))

        allowed = api_client.delete(customer_url)
        assert allowed.status_code == status.HTTP_204_NO_CONTENT


@pytest.mark.django_db
class TestInvoiceActions:

    def test_by_customer(self, api_client, invoice, invoice_customer):
        url = reverse('invoices:invoice-by-customer', kwargs={'customer_id': invoice_customer.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [i['id'] for i in response.data] == [str(invoice.id)]

    def test_by_unknown_customer(self, api_client):
        url = reverse('invoices:invoice-by-customer', kwargs={'customer_id': uuid.uuid4()})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_share(self, api_client, invoice, shop):
        url = reverse('invoices:invoice-share', kwargs={'pk': invoice.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['phone'] == '919812345678'
        assert response.data['whatsapp_url'].startswith('https://wa.me/919812345678?text=')
        assert '*INVOICE: NZ-00007*' in response.data['message']
        assert unquote(response.data['whatsapp_url'].split('text=', 1)[1]) == response.data['message']
