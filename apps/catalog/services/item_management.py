"""
Catalog item service.

Handles item search and CRUD. Items always reference an existing
category and unit.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.catalog.models import Category, Unit, Item

from .category_management import clean_name
from .exceptions import (
    CategoryNotFoundError,
    UnitNotFoundError,
    ItemNotFoundError,
    DuplicateItemError,
)

logger = logging.getLogger(__name__)


def _get_category(category_id: UUID) -> Category:
    try:
        return Category.objects.get(id=category_id)
    except Category.DoesNotExist:
        raise CategoryNotFoundError(f"Category with ID {category_id} not found")


def _get_unit(unit_id: UUID) -> Unit:
    try:
        return Unit.objects.get(id=unit_id)
    except Unit.DoesNotExist:
        raise UnitNotFoundError(f"Unit with ID {unit_id} not found")


def search_items(*, query: Optional[str] = None) -> QuerySet:
    """
    Case-insensitive substring search on item name.

    Matches against the casefolded name column so non-ASCII names
    (Cyrillic included) fold the same way on every database.

    An empty query returns every item. Results are ordered by name.
    """
    items = Item.objects.select_related('category', 'unit')

    query = (query or '').strip()
    if query:
        items = items.filter(search_name__contains=query.casefold())

    return items.order_by('name')


def get_item_by_id(*, item_id: UUID) -> Item:
    try:
        return Item.objects.select_related('category', 'unit').get(id=item_id)
    except Item.DoesNotExist:
        raise ItemNotFoundError(f"Item with ID {item_id} not found")


@transaction.atomic
def create_item(*, name: str, category_id: UUID, unit_id: UUID) -> Item:
    """
    Create a catalog item.

    Raises:
        CategoryNotFoundError: If category doesn't exist
        UnitNotFoundError: If unit doesn't exist
        DuplicateItemError: If name is taken
    """
    name = clean_name(name)
    category = _get_category(category_id)
    unit = _get_unit(unit_id)

    try:
        with transaction.atomic():
            return Item.objects.create(name=name, category=category, unit=unit)
    except IntegrityError:
        raise DuplicateItemError(f"Item '{name}' already exists")


@transaction.atomic
def update_item(
    *,
    item_id: UUID,
    name: Optional[str] = None,
    category_id: Optional[UUID] = None,
    unit_id: Optional[UUID] = None
) -> Item:
    """Change an item's name, category or unit."""
    try:
        item = Item.objects.select_for_update().get(id=item_id)
    except Item.DoesNotExist:
        raise ItemNotFoundError(f"Item with ID {item_id} not found")

    update_fields = []

    if name is not None:
        item.name = clean_name(name)
        update_fields.append('name')

    if category_id is not None:
        item.category = _get_category(category_id)
        update_fields.append('category')

    if unit_id is not None:
        item.unit = _get_unit(unit_id)
        update_fields.append('unit')

    if update_fields:
        try:
            with transaction.atomic():
                item.save(update_fields=update_fields)
        except IntegrityError:
            raise DuplicateItemError(f"Item '{item.name}' already exists")

    return item


@transaction.atomic
def delete_item(*, item_id: UUID) -> None:
    """Delete an item. List entries referencing it are removed too."""
    try:
        item = Item.objects.select_for_update().get(id=item_id)
    except Item.DoesNotExist:
        raise ItemNotFoundError(f"Item with ID {item_id} not found")

    item.delete()
    logger.info("Deleted catalog item %s", item_id)
