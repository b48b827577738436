from django.contrib import admin
from apps.catalog.models import Category, Product


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    """Admin interface for Categories."""

    list_display = ['label', 'category_id', 'icon', 'is_active', 'sort_order']
    list_filter = ['is_active']
    search_fields = ['label', 'category_id']
    ordering = ['sort_order']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Products."""

    list_display = ['name', 'category', 'default_price', 'is_active', 'created_at']
    list_filter = ['is_active', 'category']
    search_fields = ['name']
    readonly_fields = ['created_at']
