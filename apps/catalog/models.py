from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class Category(models.Model):
    """User-managed label/icon pair for invoice line items."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    category_id = models.SlugField(max_length=50, unique=True, allow_unicode=True)
    label = models.CharField(max_length=100)
    icon = models.CharField(max_length=50, default='tag')
    is_active = models.BooleanField(default=True)
    sort_order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'categories'
        verbose_name_plural = 'categories'
        ordering = ['sort_order', 'created_at']

    def __str__(self):
        return f"{self.label} ({self.category_id})"


class Product(models.Model):
    """A sellable item with a default price."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    category = models.CharField(max_length=50)
    default_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'products'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} - {self.default_price}"
