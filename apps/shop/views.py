from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema

from .serializers import (
    ShopSettingsSerializer,
    ShopSettingsInputSerializer,
    ErrorSerializer,
)
from .services import (
    get_shop_settings,
    update_shop_settings,
    InvalidInvoiceSequenceError,
)


@extend_schema(
    methods=['GET'],
    responses={200: ShopSettingsSerializer},
    description='Get the shop settings, creating defaults on first access.',
    tags=['settings'],
)
@extend_schema(
    methods=['PUT', 'PATCH'],
    request=ShopSettingsInputSerializer,
    responses={200: ShopSettingsSerializer, 400: ErrorSerializer},
    description='Update the given settings fields; omitted fields are kept.',
    tags=['settings'],
)
@api_view(['GET', 'PUT', 'PATCH'])
def shop_settings(request):
    """Read or update the singleton shop settings - thin HTTP handler."""
    if request.method == 'GET':
        return Response(ShopSettingsSerializer(get_shop_settings()).data)

    serializer = ShopSettingsInputSerializer(data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)

    try:
        settings_row = update_shop_settings(data=serializer.validated_data)
    except InvalidInvoiceSequenceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(ShopSettingsSerializer(settings_row).data)
