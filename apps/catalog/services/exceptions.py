"""Domain-specific exceptions for catalog services."""


class CatalogServiceError(Exception):
    """Base exception for catalog services."""
    pass


class CategoryNotFoundError(CatalogServiceError):
    """Raised when a category does not exist."""
    pass


class DuplicateCategoryError(CatalogServiceError):
    """Raised when a category label or category_id is already taken."""
    pass


class ProductNotFoundError(CatalogServiceError):
    """Raised when a product does not exist."""
    pass


class InvalidCategoryError(CatalogServiceError):
    """Raised when a category label or category_id is unusable."""
    pass
