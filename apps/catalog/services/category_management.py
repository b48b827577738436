"""Category CRUD operations and label resolution."""

import logging
from typing import Optional, Dict, Any, Iterable, List
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction, IntegrityError
from django.utils.text import slugify

from apps.shop.models import ShopSettings, SETTINGS_PK
from apps.shop.services import get_shop_settings

from ..models import Category
from .exceptions import CategoryNotFoundError, DuplicateCategoryError, InvalidCategoryError

logger = logging.getLogger(__name__)


# (category_id, label, icon) in display order
DEFAULT_CATEGORIES = [
    ('suit', 'Suit', 'shopping-bag'),
    ('kurti', 'Kurti', 'layout'),
    ('top', 'Top', 'airplay'),
    ('jewellery', 'Jewellery', 'award'),
    ('trousers', 'Trousers', 'align-left'),
    ('pants', 'Pants', 'sidebar'),
]

DEFAULT_CATEGORY_LABELS = {
    category_id: label for category_id, label, _icon in DEFAULT_CATEGORIES
}


def seed_default_categories() -> int:
    """
    Insert any missing default categories and mark the shop as seeded.

    Returns:
        Number of categories created
    """
    created_count = 0
    with transaction.atomic():
        get_shop_settings()
        for sort_order, (category_id, label, icon) in enumerate(DEFAULT_CATEGORIES):
            _, created = Category.objects.get_or_create(
                category_id=category_id,
                defaults={
                    'label': label,
                    'icon': icon,
                    'sort_order': sort_order,
                    'is_active': True,
                }
            )
            if created:
                created_count += 1
        ShopSettings.objects.filter(pk=SETTINGS_PK).update(categories_seeded=True)

    if created_count:
        logger.info("Seeded %d default categories", created_count)
    return created_count


def ensure_default_categories() -> int:
    """
    Seed the defaults on first run only.

    The first caller claims the shop's ``categories_seeded`` flag and seeds
    if the table is empty at that point. Later calls never seed again, so
    categories the shop deleted stay deleted.

    Returns:
        Number of categories created
    """
    with transaction.atomic():
        get_shop_settings()
        claimed = (
            ShopSettings.objects
            .filter(pk=SETTINGS_PK, categories_seeded=False)
            .update(categories_seeded=True)
        )
        if not claimed or Category.objects.exists():
            return 0
        return seed_default_categories()


def list_categories() -> List[Category]:
    """Return all categories by sort order, seeding the defaults on first run."""
    ensure_default_categories()
    return list(Category.objects.order_by('sort_order', 'created_at'))


def get_category_by_id(*, category_pk: UUID) -> Category:
    """
    Get category by primary key.

    Raises:
        CategoryNotFoundError: If category doesn't exist
    """
    try:
        return Category.objects.get(id=category_pk)
    except (Category.DoesNotExist, DjangoValidationError, ValueError):
        raise CategoryNotFoundError(f"Category {category_pk} not found")


def _make_category_id(value: str) -> str:
    category_id = slugify(value, allow_unicode=True)
    if not category_id:
        raise InvalidCategoryError(f"'{value}' does not give a usable category id")
    return category_id


def _ensure_label_available(label: str, exclude_pk: Optional[UUID] = None) -> None:
    queryset = Category.objects.filter(label__iexact=label)
    if exclude_pk is not None:
        queryset = queryset.exclude(id=exclude_pk)
    if queryset.exists():
        raise DuplicateCategoryError(f"A category named '{label}' already exists")


def _ensure_category_id_available(category_id: str, exclude_pk: Optional[UUID] = None) -> None:
    queryset = Category.objects.filter(category_id=category_id)
    if exclude_pk is not None:
        queryset = queryset.exclude(id=exclude_pk)
    if queryset.exists():
        raise DuplicateCategoryError(f"Category id '{category_id}' is already in use")


@transaction.atomic
def create_category(
    *,
    label: str,
    category_id: Optional[str] = None,
    icon: str = 'tag',
    is_active: bool = True,
    sort_order: Optional[int] = None
) -> Category:
    """
    Create a new category.

    Args:
        label: Display name, unique case-insensitively
        category_id: Stable slug; derived from label when omitted
        icon: Symbolic icon name
        is_active: Whether the category is offered for new items
        sort_order: Position in lists; appended at the end when omitted

    Returns:
        Created Category instance

    Raises:
        DuplicateCategoryError: If the label or category_id is taken
        InvalidCategoryError: If the label or category_id slugifies to nothing
    """
    label = label.strip()
    if not label:
        raise InvalidCategoryError("Category label is required")
    category_id = _make_category_id(category_id or label)

    _ensure_label_available(label)
    _ensure_category_id_available(category_id)

    if sort_order is None:
        sort_order = Category.objects.count()

    try:
        category = Category.objects.create(
            category_id=category_id,
            label=label,
            icon=icon or 'tag',
            is_active=is_active,
            sort_order=sort_order,
        )
    except IntegrityError:
        raise DuplicateCategoryError(f"Category id '{category_id}' is already in use")

    logger.info("Created category %s (%s)", category.category_id, category.label)
    return category


@transaction.atomic
def update_category(*, category_pk: UUID, data: Dict[str, Any]) -> Category:
    """
    Update a category with the given fields only.

    Raises:
        CategoryNotFoundError: If category doesn't exist
        DuplicateCategoryError: If the new label or category_id is taken
        InvalidCategoryError: If the new category_id slugifies to nothing
    """
    try:
        category = Category.objects.select_for_update().get(id=category_pk)
    except (Category.DoesNotExist, DjangoValidationError, ValueError):
        raise CategoryNotFoundError(f"Category {category_pk} not found")

    allowed_fields = ['category_id', 'label', 'icon', 'is_active', 'sort_order']

    for field, value in data.items():
        if field not in allowed_fields:
            continue
        if field == 'label':
            value = value.strip()
            if not value:
                raise InvalidCategoryError("Category label is required")
            _ensure_label_available(value, exclude_pk=category.id)
        elif field == 'category_id':
            if not value.strip():
                continue
            value = _make_category_id(value)
            _ensure_category_id_available(value, exclude_pk=category.id)
        setattr(category, field, value)

    try:
        category.save()
    except IntegrityError:
        raise DuplicateCategoryError(f"Category id '{category.category_id}' is already in use")

    return category


@transaction.atomic
def delete_category(*, category_pk: UUID) -> None:
    """
    Delete a category.

    Invoices keep their category_id strings; labels for them are resolved
    through ``resolve_category_label``.

    Raises:
        CategoryNotFoundError: If category doesn't exist
    """
    category = get_category_by_id(category_pk=category_pk)
    category.delete()
    logger.info("Deleted category %s", category.category_id)


def resolve_category_label(
    category_id: str,
    categories: Optional[Iterable[Category]] = None
) -> str:
    """
    Return the display label for a category_id.

    Looks in the given categories (or the stored ones), then the built-in
    defaults, then falls back to the raw id.
    """
    if categories is None:
        categories = Category.objects.all()

    for category in categories:
        if category.category_id == category_id:
            return category.label

    return DEFAULT_CATEGORY_LABELS.get(category_id, category_id)
