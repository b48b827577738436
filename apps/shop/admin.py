from django.contrib import admin
from apps.shop.models import ShopSettings


@admin.register(ShopSettings)
class ShopSettingsAdmin(admin.ModelAdmin):
    """Admin interface for the shop settings row."""

    list_display = ['shop_name', 'currency', 'invoice_prefix', 'last_invoice_number', 'updated_at']
    readonly_fields = ['last_invoice_number', 'updated_at']

    def has_add_permission(self, request):
        return not ShopSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
