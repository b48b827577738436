from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.analytics.analytics import SalesAnalytics
from apps.analytics.exceptions import AnalyticsServiceError
from apps.catalog.services import list_categories
from apps.customers.services import CustomerNotFoundError
from apps.shop.services import get_shop_settings
from .serializers import (
    InvoiceSerializer,
    InvoiceCreateSerializer,
    InvoiceUpdateSerializer,
    InvoiceFilterSerializer,
    InvoiceShareSerializer,
    split_client_totals,
)
from .services import (
    get_invoice_by_id,
    list_invoices_by_customer,
    create_invoice,
    update_invoice,
    delete_invoice,
    generate_invoice_message,
    whatsapp_phone,
    build_whatsapp_link,
    InvoiceNotFoundError,
    NoQualifyingItemsError,
    InvoiceTotalsMismatchError,
)


class InvoiceViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Invoice operations.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Filtered invoices, newest first
    create: Create an invoice (totals and number assigned by the server)
    retrieve: Get a specific invoice
    update: Update status, notes, items or discount
    destroy: Delete an invoice
    """

    serializer_class = InvoiceSerializer

    def get_queryset(self):
        return SalesAnalytics.filter_invoices()

    @extend_schema(parameters=[InvoiceFilterSerializer], responses={200: InvoiceSerializer(many=True)})
    def list(self, request, *args, **kwargs):
        query_serializer = InvoiceFilterSerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        params = query_serializer.validated_data

        try:
            invoices = SalesAnalytics.filter_invoices(
                search=params.get('search'),
                date_range=params.get('range', 'all'),
                date_from=params.get('date_from'),
                date_to=params.get('date_to'),
                status=params.get('status'),
            )
        except AnalyticsServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(InvoiceSerializer(invoices, many=True).data)

    def retrieve(self, request, *args, **kwargs):
        try:
            invoice = get_invoice_by_id(invoice_id=kwargs['pk'])
        except InvoiceNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(InvoiceSerializer(invoice).data)

    @extend_schema(request=InvoiceCreateSerializer, responses={201: InvoiceSerializer})
    def create(self, request, *args, **kwargs):
        """Create an invoice; subtotal/total, if sent, must match the server's."""
        serializer = InvoiceCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        client_totals = split_client_totals(data)

        try:
            invoice = create_invoice(client_totals=client_totals, **data)
        except (
            CustomerNotFoundError,
            NoQualifyingItemsError,
            InvoiceTotalsMismatchError,
        ) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            InvoiceSerializer(invoice).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=InvoiceUpdateSerializer, responses={200: InvoiceSerializer})
    def update(self, request, *args, **kwargs):
        serializer = InvoiceUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        client_totals = split_client_totals(data)

        try:
            invoice = update_invoice(
                invoice_id=kwargs['pk'],
                data=data,
                client_totals=client_totals
            )
        except InvoiceNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (NoQualifyingItemsError, InvoiceTotalsMismatchError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(InvoiceSerializer(invoice).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_invoice(invoice_id=kwargs['pk'])
        except InvoiceNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: InvoiceSerializer(many=True)})
    @action(
        detail=False,
        methods=['get'],
        url_path=r'customer/(?P<customer_id>[^/]+)',
        url_name='by-customer'
    )
    def by_customer(self, request, customer_id=None):
        """List a customer's invoices, newest first."""
        try:
            invoices = list_invoices_by_customer(customer_id=customer_id)
        except CustomerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(InvoiceSerializer(invoices, many=True).data)

    @extend_schema(responses={200: InvoiceShareSerializer})
    @action(detail=True, methods=['get'])
    def share(self, request, pk=None):
        """WhatsApp message text and wa.me link for an invoice."""
        try:
            invoice = get_invoice_by_id(invoice_id=pk)
        except InvoiceNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        shop = get_shop_settings()
        categories = list_categories()

        return Response({
            'phone': whatsapp_phone(invoice.customer_phone),
            'message': generate_invoice_message(invoice, shop, categories),
            'whatsapp_url': build_whatsapp_link(invoice, shop, categories),
        })
