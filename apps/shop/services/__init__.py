"""Services for shop settings."""

from .exceptions import (
    ShopServiceError,
    InvalidInvoiceSequenceError,
)
from .settings_management import (
    get_shop_settings,
    update_shop_settings,
)

__all__ = [
    'ShopServiceError',
    'InvalidInvoiceSequenceError',
    'get_shop_settings',
    'update_shop_settings',
]
