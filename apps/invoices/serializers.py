from decimal import Decimal
from rest_framework import serializers
from .models import Invoice, InvoiceStatus, DiscountType

DATE_RANGE_CHOICES = ['all', 'today', 'week', 'month', 'custom']


# =============================================================================
# Input Serializers
# =============================================================================

class InvoiceItemInputSerializer(serializers.Serializer):
    """
    One line item as sent by the client.

    Zero-price rows are accepted here and dropped by the calculator;
    any ``line_total`` sent is ignored and recomputed.
    """

    category = serializers.CharField(max_length=50)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')
    quantity = serializers.IntegerField(min_value=1, default=1)
    unit_price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.00')
    )


class _InvoiceMoneyFieldsMixin(serializers.Serializer):
    discount_type = serializers.ChoiceField(choices=DiscountType.choices, required=False)
    discount_value = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.00'),
        required=False
    )
    # Client-computed totals; checked against the server computation
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    total = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)


class InvoiceCreateSerializer(_InvoiceMoneyFieldsMixin):
    """Validate invoice creation payloads."""

    customer_id = serializers.UUIDField()
    items = InvoiceItemInputSerializer(many=True)
    status = serializers.ChoiceField(choices=InvoiceStatus.choices, default=InvoiceStatus.PENDING)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')


class InvoiceUpdateSerializer(_InvoiceMoneyFieldsMixin):
    """
    Validate invoice update payloads.

    Only the fields present are applied. The invoice number and customer
    are not updatable.
    """

    items = InvoiceItemInputSerializer(many=True, required=False)
    status = serializers.ChoiceField(choices=InvoiceStatus.choices, required=False)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class InvoiceFilterSerializer(serializers.Serializer):
    """
    Validate invoice list query parameters.

    Query Parameters:
        search (str): Substring of customer name, phone or invoice number
        range (str): all | today | week | month | custom
        date_from (date): First day for a custom range (inclusive)
        date_to (date): Last day for a custom range (inclusive)
        status (str): paid | pending | cancelled
    """

    search = serializers.CharField(required=False, allow_blank=True, max_length=100)
    range = serializers.ChoiceField(choices=DATE_RANGE_CHOICES, required=False, default='all')
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)
    status = serializers.ChoiceField(choices=InvoiceStatus.choices, required=False)


def split_client_totals(validated_data):
    """Pop client-sent subtotal/total out of validated data."""
    client_totals = {}
    for field in ('subtotal', 'total'):
        if field in validated_data:
            client_totals[field] = validated_data.pop(field)
    return client_totals


# =============================================================================
# Output Serializers
# =============================================================================

class InvoiceSerializer(serializers.ModelSerializer):
    """Main serializer for invoices."""

    customer_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Invoice
        fields = [
            'id',
            'invoice_number',
            'customer_id',
            'customer_name',
            'customer_phone',
            'status',
            'items',
            'subtotal',
            'discount_type',
            'discount_value',
            'discount_amount',
            'total',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class InvoiceShareSerializer(serializers.Serializer):
    """WhatsApp share payload for an invoice."""

    phone = serializers.CharField()
    message = serializers.CharField()
    whatsapp_url = serializers.URLField()
