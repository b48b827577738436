from django.contrib import admin
from apps.invoices.models import Invoice


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    """Admin interface for Invoices."""

    list_display = ['invoice_number', 'customer_name', 'customer_phone', 'status', 'total', 'created_at']
    list_filter = ['status', 'discount_type', 'created_at']
    search_fields = ['invoice_number', 'customer_name', 'customer_phone']
    readonly_fields = [
        'invoice_number', 'customer', 'customer_name', 'customer_phone',
        'items', 'subtotal', 'discount_amount', 'total', 'created_at', 'updated_at',
    ]
    ordering = ['-created_at']
