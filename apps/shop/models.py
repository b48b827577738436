from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal

SETTINGS_PK = 1


class ShopSettings(models.Model):
    """
    Singleton shop configuration.

    ``last_invoice_number`` is advanced by invoice creation only, through
    an atomic UPDATE (see ``apps.invoices.services.numbering``).
    """

    id = models.PositiveSmallIntegerField(primary_key=True, default=SETTINGS_PK, editable=False)
    shop_name = models.CharField(max_length=200, default='Nazaara')
    tagline = models.CharField(max_length=200, blank=True, default='Exclusive Fashion & Style')
    address = models.TextField(blank=True, default='')
    phone = models.CharField(max_length=20, blank=True, default='')
    gst_number = models.CharField(max_length=20, blank=True, default='')
    currency = models.CharField(max_length=3, default='INR')
    tax_rate = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00')), MaxValueValidator(Decimal('100.00'))]
    )
    invoice_prefix = models.CharField(max_length=20, default='NZ-')
    last_invoice_number = models.PositiveIntegerField(default=0)
    # Set once the default categories have been offered; never cleared
    categories_seeded = models.BooleanField(default=False, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'shop_settings'
        verbose_name = 'shop settings'
        verbose_name_plural = 'shop settings'

    def __str__(self):
        return self.shop_name
