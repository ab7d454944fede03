"""
List item service.

Anyone who can see a list may edit its items; shared lists are
collaborative.
"""

from typing import Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.catalog.models import Item
from apps.lists.models import ShoppingList, ListItem

from .exceptions import (
    ListNotFoundError,
    ListItemNotFoundError,
    CatalogItemNotFoundError,
    InvalidQuantityError,
)


def _get_visible_list(list_id: UUID, user: User) -> ShoppingList:
    try:
        shopping_list = ShoppingList.objects.get(id=list_id)
    except ShoppingList.DoesNotExist:
        raise ListNotFoundError(f"List with ID {list_id} not found")

    if not shopping_list.is_visible_to(user):
        raise ListNotFoundError(f"List with ID {list_id} not found")

    return shopping_list


def _get_list_item_for_update(list_id: UUID, list_item_id: UUID, user: User) -> ListItem:
    shopping_list = _get_visible_list(list_id, user)

    try:
        return (
            ListItem.objects
            .select_for_update()
            .select_related('item')
            .get(id=list_item_id, list=shopping_list)
        )
    except ListItem.DoesNotExist:
        raise ListItemNotFoundError(f"List item with ID {list_item_id} not found")


def _check_quantity(quantity) -> int:
    if quantity is None or int(quantity) < 1:
        raise InvalidQuantityError("Quantity must be at least 1")
    return int(quantity)


@transaction.atomic
def add_list_item(
    *,
    list_id: UUID,
    user: User,
    item_id: UUID,
    quantity: int = 1,
    comment: Optional[str] = None
) -> ListItem:
    """
    Put a catalog item on a list.

    Raises:
        ListNotFoundError: If list doesn't exist or isn't visible
        CatalogItemNotFoundError: If the catalog item doesn't exist
        InvalidQuantityError: If quantity < 1
    """
    shopping_list = _get_visible_list(list_id, user)
    quantity = _check_quantity(quantity)

    try:
        item = Item.objects.select_related('category', 'unit').get(id=item_id)
    except Item.DoesNotExist:
        raise CatalogItemNotFoundError(f"Item with ID {item_id} not found")

    return ListItem.objects.create(
        list=shopping_list,
        item=item,
        quantity=quantity,
        comment=comment or '',
    )


@transaction.atomic
def update_list_item(
    *,
    list_id: UUID,
    list_item_id: UUID,
    user: User,
    quantity: Optional[int] = None,
    comment: Optional[str] = None
) -> ListItem:
    """
    Change quantity and/or comment of a list entry.

    Raises:
        ListNotFoundError: If list doesn't exist or isn't visible
        ListItemNotFoundError: If the entry isn't on this list
        InvalidQuantityError: If quantity < 1
    """
    list_item = _get_list_item_for_update(list_id, list_item_id, user)

    update_fields = []

    if quantity is not None:
        list_item.quantity = _check_quantity(quantity)
        update_fields.append('quantity')

    if comment is not None:
        list_item.comment = comment
        update_fields.append('comment')

    if update_fields:
        list_item.save(update_fields=update_fields)

    return list_item


@transaction.atomic
def toggle_list_item(*, list_id: UUID, list_item_id: UUID, user: User) -> ListItem:
    """Flip the checked flag of a list entry."""
    list_item = _get_list_item_for_update(list_id, list_item_id, user)
    list_item.toggle()
    return list_item


@transaction.atomic
def remove_list_item(*, list_id: UUID, list_item_id: UUID, user: User) -> None:
    """Remove an entry from a list."""
    list_item = _get_list_item_for_update(list_id, list_item_id, user)
    list_item.delete()
