# Generated manually for shop app

from decimal import Decimal
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ShopSettings',
            fields=[
                ('id', models.PositiveSmallIntegerField(default=1, editable=False, primary_key=True, serialize=False)),
                ('shop_name', models.CharField(default='Nazaara', max_length=200)),
                ('tagline', models.CharField(blank=True, default='Exclusive Fashion & Style', max_length=200)),
                ('address', models.TextField(blank=True, default='')),
                ('phone', models.CharField(blank=True, default='', max_length=20)),
                ('gst_number', models.CharField(blank=True, default='', max_length=20)),
                ('currency', models.CharField(default='INR', max_length=3)),
                ('tax_rate', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=5, validators=[MinValueValidator(Decimal('0.00')), MaxValueValidator(Decimal('100.00'))])),
                ('invoice_prefix', models.CharField(default='NZ-', max_length=20)),
                ('last_invoice_number', models.PositiveIntegerField(default=0)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'shop_settings',
                'verbose_name': 'shop settings',
                'verbose_name_plural': 'shop settings',
            },
        ),
    ]
