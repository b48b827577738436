"""
Serializers for analytics app.

This module contains:
1. Input serializers - Query parameter validation
2. Response serializers - API documentation and output formatting

Input Serializers:
    DailySummaryQuerySerializer - Validates the summary date

Response Serializers:
    DailySummarySerializer - One day's sales totals
    CustomerLifetimeTotalSerializer - A customer's lifetime spend
"""

from rest_framework import serializers


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class DailySummaryQuerySerializer(serializers.Serializer):
    """
    Validate daily summary query parameters.

    Query Parameters:
        date (date): Calendar day in YYYY-MM-DD format. Defaults to today.
    """

    date = serializers.DateField(required=False, help_text='Day to summarize (YYYY-MM-DD)')


# =============================================================================
# Response Serializers
# =============================================================================

class DailySummarySerializer(serializers.Serializer):
    date = serializers.DateField()
    total_sales = serializers.DecimalField(max_digits=14, decimal_places=2)
    invoice_count = serializers.IntegerField()
    paid_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    pending_amount = serializers.DecimalField(max_digits=14, decimal_places=2)


class CustomerLifetimeTotalSerializer(serializers.Serializer):
    customer_id = serializers.UUIDField()
    lifetime_total = serializers.DecimalField(max_digits=14, decimal_places=2)
    invoice_count = serializers.IntegerField()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
