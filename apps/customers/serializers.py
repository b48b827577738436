from rest_framework import serializers
from .models import Customer


# =============================================================================
# Input Serializers
# =============================================================================

class CustomerInputSerializer(serializers.Serializer):
    """
    Validate customer create/update payloads.

    Phone format is checked by the service, which normalizes it to 10 digits.
    """

    name = serializers.CharField(max_length=200)
    phone = serializers.CharField(max_length=32)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    address = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError('Name is required')
        return value


class CustomerQuerySerializer(serializers.Serializer):
    """Validate query parameters for customer listing."""

    search = serializers.CharField(required=False, allow_blank=True, max_length=100)


# =============================================================================
# Output Serializers
# =============================================================================

class CustomerSerializer(serializers.ModelSerializer):
    """Main serializer for customers."""

    class Meta:
        model = Customer
        fields = [
            'id',
            'name',
            'phone',
            'email',
            'address',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields
