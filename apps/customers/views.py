from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    CustomerSerializer,
    CustomerInputSerializer,
    CustomerQuerySerializer,
)
from .services import (
    list_customers,
    get_customer_by_id,
    get_customer_by_phone,
    create_customer,
    update_customer,
    delete_customer,
    CustomerNotFoundError,
    InvalidPhoneError,
    DuplicatePhoneError,
    CustomerHasInvoicesError,
)


class CustomerViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Customer CRUD operations.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Get all customers, newest first
    create: Create a new customer
    retrieve: Get a specific customer
    update: Update a customer (fields omitted are left unchanged)
    destroy: Delete a customer without invoices
    """

    serializer_class = CustomerSerializer

    def get_queryset(self):
        query_serializer = CustomerQuerySerializer(data=self.request.query_params)
        query_serializer.is_valid(raise_exception=True)
        return list_customers(search=query_serializer.validated_data.get('search'))

    def retrieve(self, request, *args, **kwargs):
        try:
            customer = get_customer_by_id(customer_id=kwargs['pk'])
        except CustomerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(CustomerSerializer(customer).data)

    @extend_schema(request=CustomerInputSerializer, responses={201: CustomerSerializer})
    def create(self, request, *args, **kwargs):
        """Create a new customer."""
        serializer = CustomerInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            customer = create_customer(**serializer.validated_data)
        except (InvalidPhoneError, DuplicatePhoneError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            CustomerSerializer(customer).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=CustomerInputSerializer, responses={200: CustomerSerializer})
    def update(self, request, *args, **kwargs):
        """Update a customer; PUT and PATCH both merge the given fields."""
        serializer = CustomerInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            customer = update_customer(
                customer_id=kwargs['pk'],
                data=serializer.validated_data
            )
        except CustomerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (InvalidPhoneError, DuplicatePhoneError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CustomerSerializer(customer).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a customer."""
        try:
            delete_customer(customer_id=kwargs['pk'])
        except CustomerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except CustomerHasInvoicesError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: CustomerSerializer})
    @action(detail=False, methods=['get'], url_path=r'phone/(?P<phone>[^/]+)', url_name='by-phone')
    def by_phone(self, request, phone=None):
        """Look a customer up by phone; responds with null when absent."""
        customer = get_customer_by_phone(phone=phone)
        if customer is None:
            return Response(None)
        return Response(CustomerSerializer(customer).data)
