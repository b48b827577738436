from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class InvoiceStatus(models.TextChoices):
    PAID = 'paid', 'Paid'
    PENDING = 'pending', 'Pending'
    CANCELLED = 'cancelled', 'Cancelled'


class DiscountType(models.TextChoices):
    PERCENT = 'percent', 'Percent'
    FIXED = 'fixed', 'Fixed amount'


class Invoice(models.Model):
    """
    A bill issued to a customer.

    ``items`` holds the line items as a list of
    ``{category, description, quantity, unit_price, line_total}`` with
    money as decimal strings. ``customer_name`` and ``customer_phone`` are
    captured at creation and do not follow later customer edits.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    invoice_number = models.CharField(max_length=40, unique=True, editable=False)

    customer = models.ForeignKey(
        'customers.Customer',
        on_delete=models.PROTECT,
        null=True,
        related_name='invoices'
    )
    customer_name = models.CharField(max_length=200)
    customer_phone = models.CharField(max_length=10)

    status = models.CharField(
        max_length=10,
        choices=InvoiceStatus.choices,
        default=InvoiceStatus.PENDING
    )
    items = models.JSONField(default=list)

    subtotal = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    discount_type = models.CharField(
        max_length=10,
        choices=DiscountType.choices,
        default=DiscountType.PERCENT
    )
    discount_value = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    discount_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00')
    )
    total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'invoices'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['customer', '-created_at'], name='invoices_customer_idx'),
            models.Index(fields=['status'], name='invoices_status_idx'),
        ]

    def __str__(self):
        return f"{self.invoice_number} - {self.customer_name} ({self.total})"
