"""
Specific list shares.

The owner replaces the whole set of grants in one call. The owner is
never stored as a share and unknown user ids are skipped.
"""

import logging
from typing import Iterable, List
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.lists.models import ShoppingList, ListShare

from .exceptions import (
    ListNotFoundError,
    InsufficientPermissionsError,
    InvalidShareRecipientsError,
)

logger = logging.getLogger(__name__)


def _get_owned_list(list_id: UUID, user: User, lock: bool = False) -> ShoppingList:
    queryset = ShoppingList.objects.all()
    if lock:
        queryset = queryset.select_for_update()

    try:
        shopping_list = queryset.get(id=list_id)
    except ShoppingList.DoesNotExist:
        raise ListNotFoundError(f"List with ID {list_id} not found")

    if not shopping_list.is_owner(user):
        raise InsufficientPermissionsError("Only the list owner can manage sharing")

    return shopping_list


def _parse_user_ids(user_ids) -> List[UUID]:
    """Normalize the requested ids, keeping first-seen order."""
    if not isinstance(user_ids, (list, tuple, set)):
        raise InvalidShareRecipientsError("user_ids must be a list of user IDs")

    parsed = []
    for value in user_ids:
        try:
            user_id = value if isinstance(value, UUID) else UUID(str(value))
        except ValueError:
            raise InvalidShareRecipientsError(f"Invalid user ID: {value}")
        if user_id not in parsed:
            parsed.append(user_id)
    return parsed


def get_list_shares(*, list_id: UUID, user: User) -> List[UUID]:
    """
    User ids holding a specific share on the list (owner only).

    Raises:
        ListNotFoundError: If list doesn't exist
        InsufficientPermissionsError: If user is not the owner
    """
    shopping_list = _get_owned_list(list_id, user)
    return list(
        ListShare.objects
        .filter(list=shopping_list)
        .order_by('user__name')
        .values_list('user_id', flat=True)
    )


@transaction.atomic
def update_list_shares(*, list_id: UUID, user: User, user_ids: Iterable) -> List[UUID]:
    """
    Replace all specific shares of a list.

    Ownership is checked before the payload is looked at, so a non-owner
    is always refused. The list row stays locked until commit; concurrent
    replacements serialize and the last one wins.

    Args:
        list_id: UUID of the list
        user: User requesting the change (must be owner)
        user_ids: Users to grant; duplicates, the owner and unknown ids
            are dropped

    Returns:
        The user ids now holding a share

    Raises:
        ListNotFoundError: If list doesn't exist
        InsufficientPermissionsError: If user is not the owner
        InvalidShareRecipientsError: If user_ids is malformed
    """
    shopping_list = _get_owned_list(list_id, user, lock=True)

    requested = [
        user_id for user_id in _parse_user_ids(user_ids)
        if user_id != shopping_list.owner_id
    ]
    existing_ids = set(
        User.objects.filter(id__in=requested).values_list('id', flat=True)
    )
    granted = [user_id for user_id in requested if user_id in existing_ids]

    ListShare.objects.filter(list=shopping_list).delete()
    ListShare.objects.bulk_create([
        ListShare(list=shopping_list, user_id=user_id)
        for user_id in granted
    ])

    skipped = len(requested) - len(granted)
    logger.info(
        "Shares of list %s replaced: %d granted, %d unknown skipped",
        list_id, len(granted), skipped
    )

    return granted
