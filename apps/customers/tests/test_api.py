import pytest
import uuid
from django.urls import reverse
from rest_framework import status
from apps.customers.models import Customer


@pytest.mark.django_db
class TestCustomerList:
    """Tests for GET /api/customers"""

    def test_list_customers(self, api_client, customer, other_customer):
        url = reverse('customers:customer-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 2
        assert response.data[0]['name'] == 'Rahul Mehta'

    def test_list_customers_search(self, api_client, customer, other_customer):
        url = reverse('customers:customer-list')
        response = api_client.get(url, {'search': 'verma'})

        assert response.status_code == status.HTTP_200_OK
        assert [c['phone'] for c in response.data] == ['9876543210']


@pytest.mark.django_db
class TestCustomerCreate:
    """Tests for POST /api/customers"""

    def test_create_customer(self, api_client):
        url = reverse('customers:customer-list')
        response = api_client.post(url, {
            'name': 'Kavya Rao',
            'phone': '99887 76655',
            'email': 'kavya@example.com',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['phone'] == '9988776655'
        assert response.data['address'] == ''

    def test_create_customer_duplicate_phone(self, api_client, customer):
        url = reverse('customers:customer-list')
        response = api_client.post(url, {
            'name': 'Duplicate',
            'phone': customer.phone,
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'A customer with this phone number already exists'
        assert Customer.objects.get(phone=customer.phone).name == 'Asha Verma'

    def test_create_customer_invalid_phone(self, api_client):
        url = reverse('customers:customer-list')
        response = api_client.post(url, {'name': 'Bad', 'phone': '555'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_create_customer_missing_name(self, api_client):
        url = reverse('customers:customer-list')
        response = api_client.post(url, {'phone': '9000011111'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data
        assert 'name' in response.data['details']


@pytest.mark.django_db
class TestCustomerDetail:
    """Tests for GET/PUT/DELETE /api/customers/{id}"""

    def test_retrieve_customer(self, api_client, customer):
        url = reverse('customers:customer-detail', kwargs={'pk': customer.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == 'asha@example.com'

    def test_retrieve_customer_not_found(self, api_client):
        url = reverse('customers:customer-detail', kwargs={'pk': uuid.uuid4()})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert 'error' in response.data

    def test_update_customer(self, api_client, customer):
        url = reverse('customers:customer-detail', kwargs={'pk': customer.id})
        response = api_client.put(url, {'notes': 'Prefers cotton'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['notes'] == 'Prefers cotton'
        assert response.data['name'] == 'Asha Verma'

    def test_update_customer_phone_conflict(self, api_client, customer, other_customer):
        url = reverse('customers:customer-detail', kwargs={'pk': other_customer.id})
        response = api_client.patch(url, {'phone': customer.phone}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_customer(self, api_client, customer):
        url = reverse('customers:customer-detail', kwargs={'pk': customer.id})
        response = api_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Customer.objects.filter(id=customer.id).exists()


@pytest.mark.django_db
class TestCustomerByPhone:
    """Tests for GET /api/customers/phone/{phone}"""

    def test_lookup_existing(self, api_client, customer):
        url = reverse('customers:customer-by-phone', kwargs={'phone': '9876543210'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(customer.id)

    def test_lookup_missing_returns_null(self, api_client, customer):
        url = reverse('customers:customer-by-phone', kwargs={'phone': '9000000000'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data is None
