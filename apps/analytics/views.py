from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.customers.services import CustomerNotFoundError
from .analytics import SalesAnalytics
from .serializers import (
    DailySummaryQuerySerializer,
    DailySummarySerializer,
    CustomerLifetimeTotalSerializer,
    ErrorSerializer,
)


@extend_schema(
    parameters=[
        OpenApiParameter('date', OpenApiTypes.DATE, description='Day to summarize (YYYY-MM-DD), default today'),
    ],
    responses={
        200: DailySummarySerializer,
        400: ErrorSerializer,
    },
    description="Sales totals for one day; cancelled invoices are excluded.",
    tags=['analytics'],
)
@api_view(['GET'])
def daily_summary(request):
    """Get one day's sales summary - thin HTTP handler."""
    query_serializer = DailySummaryQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    data = SalesAnalytics.daily_summary(query_serializer.validated_data.get('date'))

    return Response(DailySummarySerializer(data).data)


@extend_schema(
    responses={
        200: CustomerLifetimeTotalSerializer,
        404: ErrorSerializer,
    },
    description="Total of all the customer's invoices, cancelled included.",
    tags=['analytics'],
)
@api_view(['GET'])
def customer_lifetime_total(request, customer_id):
    """Get a customer's lifetime spend - thin HTTP handler."""
    try:
        data = SalesAnalytics.customer_lifetime_total(customer_id)
    except CustomerNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(CustomerLifetimeTotalSerializer(data).data)
