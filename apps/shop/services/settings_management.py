"""Shop settings accessor and partial updates."""

import logging
from typing import Dict, Any

from django.db import transaction

from ..models import ShopSettings, SETTINGS_PK
from .exceptions import InvalidInvoiceSequenceError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = [
    'shop_name',
    'tagline',
    'address',
    'phone',
    'gst_number',
    'currency',
    'tax_rate',
    'invoice_prefix',
    'last_invoice_number',
]


def get_shop_settings() -> ShopSettings:
    """Return the settings row, creating it with defaults if absent."""
    settings_row, created = ShopSettings.objects.get_or_create(pk=SETTINGS_PK)
    if created:
        logger.info("Created default shop settings")
    return settings_row


@transaction.atomic
def update_shop_settings(*, data: Dict[str, Any]) -> ShopSettings:
    """
    Merge the given fields into the settings row.

    Args:
        data: Fields to update; unknown keys are ignored

    Returns:
        Updated ShopSettings instance

    Raises:
        InvalidInvoiceSequenceError: If last_invoice_number would decrease
    """
    get_shop_settings()
    settings_row = ShopSettings.objects.select_for_update().get(pk=SETTINGS_PK)

    for field, value in data.items():
        if field not in UPDATABLE_FIELDS:
            continue
        if field == 'last_invoice_number' and value < settings_row.last_invoice_number:
            raise InvalidInvoiceSequenceError(
                f"last_invoice_number cannot go below {settings_row.last_invoice_number}"
            )
        if field == 'currency':
            value = value.upper()
        setattr(settings_row, field, value)

    settings_row.save()
    logger.info("Updated shop settings: %s", ', '.join(sorted(data)))
    return settings_row
