from decimal import Decimal
from rest_framework import serializers
from .models import Category, Product


# =============================================================================
# Category Serializers
# =============================================================================

class CategoryInputSerializer(serializers.Serializer):
    """Validate category create/update payloads."""

    category_id = serializers.CharField(max_length=50, required=False, allow_blank=True)
    label = serializers.CharField(max_length=100)
    icon = serializers.CharField(max_length=50, required=False, default='tag')
    is_active = serializers.BooleanField(required=False, default=True)
    sort_order = serializers.IntegerField(required=False, min_value=0)

    def validate_label(self, value):
        if not value.strip():
            raise serializers.ValidationError('Label is required')
        return value


class CategorySerializer(serializers.ModelSerializer):

    class Meta:
        model = Category
        fields = [
            'id',
            'category_id',
            'label',
            'icon',
            'is_active',
            'sort_order',
            'created_at',
        ]
        read_only_fields = fields


# =============================================================================
# Product Serializers
# =============================================================================

class ProductInputSerializer(serializers.Serializer):
    """Validate product create/update payloads."""

    name = serializers.CharField(max_length=200)
    category = serializers.CharField(max_length=50)
    default_price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.00')
    )
    is_active = serializers.BooleanField(required=False, default=True)


class ProductSerializer(serializers.ModelSerializer):

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'category',
            'default_price',
            'is_active',
            'created_at',
        ]
        read_only_fields = fields
