"""
Shopping list management service.

Handles list CRUD operations with proper transaction safety.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.accounts.models import User
from apps.lists.models import ShoppingList

from .exceptions import (
    ListNotFoundError,
    InvalidListNameError,
    DuplicateListNameError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


def _clean_list_name(name: Optional[str]) -> str:
    name = (name or '').strip()
    if not name:
        raise InvalidListNameError("List name cannot be empty")
    return name


def _get_owned_list_for_update(list_id: UUID, user: User, action: str) -> ShoppingList:
    try:
        shopping_list = (
            ShoppingList.objects
            .select_for_update()
            .get(id=list_id)
        )
    except ShoppingList.DoesNotExist:
        raise ListNotFoundError(f"List with ID {list_id} not found")

    if not shopping_list.is_owner(user):
        raise InsufficientPermissionsError(f"Only the list owner can {action} the list")

    return shopping_list


@transaction.atomic
def create_list(*, name: str, owner: User, is_shared: bool = True) -> ShoppingList:
    """
    Create a new shopping list.

    Args:
        name: Unique list name
        owner: User who will own the list
        is_shared: Whether every user can see the list (default True)

    Raises:
        InvalidListNameError: If name is empty
        DuplicateListNameError: If name is taken
    """
    name = _clean_list_name(name)

    try:
        with transaction.atomic():
            shopping_list = ShoppingList.objects.create(
                name=name,
                owner=owner,
                is_shared=is_shared,
            )
    except IntegrityError:
        raise DuplicateListNameError(f"List '{name}' already exists")

    return shopping_list


@transaction.atomic
def update_list(
    *,
    list_id: UUID,
    user: User,
    name: Optional[str] = None,
    is_shared: Optional[bool] = None
) -> ShoppingList:
    """
    Rename a list and/or toggle global sharing (owner only).

    Turning ``is_shared`` on or off leaves specific shares untouched, so
    switching it back off restores the earlier grants.

    Raises:
        ListNotFoundError: If list doesn't exist
        InsufficientPermissionsError: If user is not the owner
        InvalidListNameError: If name is empty
        DuplicateListNameError: If name is taken
    """
    shopping_list = _get_owned_list_for_update(list_id, user, 'update')

    update_fields = ['updated_at']

    if name is not None:
        shopping_list.name = _clean_list_name(name)
        update_fields.append('name')

    if is_shared is not None:
        shopping_list.is_shared = is_shared
        update_fields.append('is_shared')

    try:
        with transaction.atomic():
            shopping_list.save(update_fields=update_fields)
    except IntegrityError:
        raise DuplicateListNameError(f"List '{shopping_list.name}' already exists")

    return shopping_list


@transaction.atomic
def delete_list(*, list_id: UUID, user: User) -> None:
    """
    Delete a list (owner only).

    Cascading deletes remove all list items and specific shares.

    Raises:
        ListNotFoundError: If list doesn't exist
        InsufficientPermissionsError: If user is not the owner
    """
    shopping_list = _get_owned_list_for_update(list_id, user, 'delete')
    shopping_list.delete()

    logger.info("List %s deleted by user %s", list_id, user.id)
