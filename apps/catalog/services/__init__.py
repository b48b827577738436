"""Services for catalog business logic."""

from .exceptions import (
    CatalogServiceError,
    CategoryNotFoundError,
    DuplicateCategoryError,
    InvalidCategoryError,
    ProductNotFoundError,
)
from .category_management import (
    DEFAULT_CATEGORIES,
    DEFAULT_CATEGORY_LABELS,
    seed_default_categories,
    ensure_default_categories,
    list_categories,
    get_category_by_id,
    create_category,
    update_category,
    delete_category,
    resolve_category_label,
)
from .product_management import (
    list_products,
    get_product_by_id,
    create_product,
    update_product,
    delete_product,
)

__all__ = [
    # Exceptions
    'CatalogServiceError',
    'CategoryNotFoundError',
    'DuplicateCategoryError',
    'InvalidCategoryError',
    'ProductNotFoundError',
    # Categories
    'DEFAULT_CATEGORIES',
    'DEFAULT_CATEGORY_LABELS',
    'seed_default_categories',
    'ensure_default_categories',
    'list_categories',
    'get_category_by_id',
    'create_category',
    'update_category',
    'delete_category',
    'resolve_category_label',
    # Products
    'list_products',
    'get_product_by_id',
    'create_product',
    'update_product',
    'delete_product',
]
