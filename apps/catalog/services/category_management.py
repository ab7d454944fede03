"""
Category management service.

Deleting a category never orphans items: they are moved to the
fallback category first.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet, Count

from apps.catalog.models import Category, DEFAULT_CATEGORY_NAME

from .exceptions import (
    InvalidCatalogNameError,
    CategoryNotFoundError,
    DuplicateCategoryError,
    ProtectedDefaultCategoryError,
)

logger = logging.getLogger(__name__)


def clean_name(name: Optional[str]) -> str:
    name = (name or '').strip()
    if not name:
        raise InvalidCatalogNameError("Name cannot be empty")
    return name


def get_categories() -> QuerySet:
    """All categories ordered by name, with item counts."""
    return Category.objects.annotate(item_count=Count('items')).order_by('name')


def get_category_by_id(*, category_id: UUID) -> Category:
    try:
        return Category.objects.get(id=category_id)
    except Category.DoesNotExist:
        raise CategoryNotFoundError(f"Category with ID {category_id} not found")


@transaction.atomic
def create_category(*, name: str, comment: str = '') -> Category:
    """
    Create a category.

    Raises:
        InvalidCatalogNameError: If name is empty
        DuplicateCategoryError: If name is taken
    """
    name = clean_name(name)
    try:
        with transaction.atomic():
            return Category.objects.create(name=name, comment=comment or '')
    except IntegrityError:
        raise DuplicateCategoryError(f"Category '{name}' already exists")


@transaction.atomic
def update_category(
    *,
    category_id: UUID,
    name: Optional[str] = None,
    comment: Optional[str] = None
) -> Category:
    """
    Rename a category or change its comment.

    The fallback category keeps its name.
    """
    try:
        category = Category.objects.select_for_update().get(id=category_id)
    except Category.DoesNotExist:
        raise CategoryNotFoundError(f"Category with ID {category_id} not found")

    update_fields = []

    if name is not None:
        name = clean_name(name)
        if category.is_default and name != DEFAULT_CATEGORY_NAME:
            raise ProtectedDefaultCategoryError("The default category cannot be renamed")
        category.name = name
        update_fields.append('name')

    if comment is not None:
        category.comment = comment
        update_fields.append('comment')

    if update_fields:
        try:
            with transaction.atomic():
                category.save(update_fields=update_fields)
        except IntegrityError:
            raise DuplicateCategoryError(f"Category '{name}' already exists")

    return category


@transaction.atomic
def delete_category(*, category_id: UUID) -> int:
    """
    Delete a category, reassigning its items to the fallback category.

    Returns:
        Number of items reassigned

    Raises:
        CategoryNotFoundError: If category doesn't exist
        ProtectedDefaultCategoryError: If it is the fallback category
    """
    try:
        category = Category.objects.select_for_update().get(id=category_id)
    except Category.DoesNotExist:
        raise CategoryNotFoundError(f"Category with ID {category_id} not found")

    if category.is_default:
        raise ProtectedDefaultCategoryError("The default category cannot be deleted")

    default = Category.get_default()
    moved = category.items.update(category=default)
    category.delete()

    logger.info(
        "Deleted category %s, moved %d item(s) to '%s'",
        category_id, moved, DEFAULT_CATEGORY_NAME
    )
    return moved
