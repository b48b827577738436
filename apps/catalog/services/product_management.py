"""Product CRUD operations service."""

import logging
from decimal import Decimal
from typing import Dict, Any
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import QuerySet

from ..models import Product
from .exceptions import ProductNotFoundError

logger = logging.getLogger(__name__)


def list_products() -> QuerySet:
    return Product.objects.order_by('-created_at')


def get_product_by_id(*, product_id: UUID) -> Product:
    """
    Get product by ID.

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    try:
        return Product.objects.get(id=product_id)
    except (Product.DoesNotExist, DjangoValidationError, ValueError):
        raise ProductNotFoundError(f"Product {product_id} not found")


@transaction.atomic
def create_product(
    *,
    name: str,
    category: str,
    default_price: Decimal,
    is_active: bool = True
) -> Product:
    product = Product.objects.create(
        name=name.strip(),
        category=category,
        default_price=default_price,
        is_active=is_active,
    )
    logger.info("Created product %s (%s)", product.id, product.name)
    return product


@transaction.atomic
def update_product(*, product_id: UUID, data: Dict[str, Any]) -> Product:
    """
    Update a product with the given fields only.

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    try:
        product = Product.objects.select_for_update().get(id=product_id)
    except (Product.DoesNotExist, DjangoValidationError, ValueError):
        raise ProductNotFoundError(f"Product {product_id} not found")

    allowed_fields = ['name', 'category', 'default_price', 'is_active']

    for field, value in data.items():
        if field in allowed_fields:
            setattr(product, field, value)

    product.save()
    return product


@transaction.atomic
def delete_product(*, product_id: UUID) -> None:
    product = get_product_by_id(product_id=product_id)
    product.delete()
    logger.info("Deleted product %s", product_id)
