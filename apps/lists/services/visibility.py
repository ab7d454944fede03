"""
List visibility rules.

A list is visible to a user when any of these hold:
1. the user owns it
2. the list is globally shared (``is_shared``)
3. a ListShare grants it to the user

Evaluated against the database on every call.
"""

from uuid import UUID

from django.db.models import Count, Exists, OuterRef, Prefetch, Q, QuerySet

from apps.accounts.models import User
from apps.lists.models import ShoppingList, ListShare, ListItem

from .exceptions import ListNotFoundError


def visible_lists(*, user: User) -> QuerySet:
    """
    Lists the user may read, ordered by name.

    Uses an EXISTS subquery for specific shares so rows are never
    duplicated by the join.
    """
    shared_with_user = ListShare.objects.filter(list=OuterRef('pk'), user=user)

    return (
        ShoppingList.objects
        .annotate(
            shared_with_user=Exists(shared_with_user),
            item_count=Count('items'),
        )
        .filter(
            Q(owner=user) | Q(is_shared=True) | Q(shared_with_user=True)
        )
        .select_related('owner')
        .order_by('name')
    )


def can_view_list(*, shopping_list: ShoppingList, user: User) -> bool:
    return shopping_list.is_visible_to(user)


def get_list_for_user(*, list_id: UUID, user: User) -> ShoppingList:
    """
    Get a visible list with its items, catalog items, categories and units.

    Raises:
        ListNotFoundError: If the list doesn't exist or isn't visible
    """
    try:
        return (
            visible_lists(user=user)
            .prefetch_related(
                Prefetch(
                    'items',
                    queryset=ListItem.objects.select_related(
                        'item', 'item__category', 'item__unit'
                    )
                )
            )
            .get(id=list_id)
        )
    except ShoppingList.DoesNotExist:
        raise ListNotFoundError(f"List with ID {list_id} not found")
