from decimal import Decimal
from rest_framework import serializers
from .models import ShopSettings


class ShopSettingsInputSerializer(serializers.Serializer):
    """Validate a settings patch; every field is optional."""

    shop_name = serializers.CharField(max_length=200, required=False)
    tagline = serializers.CharField(max_length=200, required=False, allow_blank=True)
    address = serializers.CharField(required=False, allow_blank=True)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True)
    gst_number = serializers.CharField(max_length=20, required=False, allow_blank=True)
    currency = serializers.CharField(min_length=3, max_length=3, required=False)
    tax_rate = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=Decimal('0.00'),
        max_value=Decimal('100.00'),
        required=False
    )
    invoice_prefix = serializers.CharField(max_length=20, required=False, allow_blank=True)
    last_invoice_number = serializers.IntegerField(min_value=0, required=False)


class ShopSettingsSerializer(serializers.ModelSerializer):

    class Meta:
        model = ShopSettings
        fields = [
            'shop_name',
            'tagline',
            'address',
            'phone',
            'gst_number',
            'currency',
            'tax_rate',
            'invoice_prefix',
            'last_invoice_number',
            'updated_at',
        ]
        read_only_fields = fields


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
