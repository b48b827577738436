"""Sequential invoice numbers backed by the shop settings counter."""

import logging

from django.db import transaction
from django.db.models import F

from apps.shop.models import ShopSettings, SETTINGS_PK

logger = logging.getLogger(__name__)

NUMBER_WIDTH = 5


def format_invoice_number(prefix: str, number: int) -> str:
    """``('NZ-', 42)`` -> ``'NZ-00042'``"""
    return f"{prefix}{number:0{NUMBER_WIDTH}d}"


def allocate_invoice_number() -> str:
    """
    Advance the counter by one and return the formatted number.

    The increment is a single ``UPDATE ... SET n = n + 1`` so concurrent
    callers each get a distinct value. Callers that create an invoice
    should wrap this and the insert in one transaction so a failed insert
    gives the number back.
    """
    with transaction.atomic():
        ShopSettings.objects.get_or_create(pk=SETTINGS_PK)
        ShopSettings.objects.filter(pk=SETTINGS_PK).update(
            last_invoice_number=F('last_invoice_number') + 1
        )
        prefix, number = (
            ShopSettings.objects
            .filter(pk=SETTINGS_PK)
            .values_list('invoice_prefix', 'last_invoice_number')
            .get()
        )

    invoice_number = format_invoice_number(prefix, number)
    logger.info("Allocated invoice number %s", invoice_number)
    return invoice_number
