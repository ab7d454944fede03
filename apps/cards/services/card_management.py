"""
Discount card management service.

Cards are private: every operation here is restricted to the owner.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.cards.models import DiscountCard

from .exceptions import (
    CardNotFoundError,
    InvalidCardNameError,
    InsufficientPermissionsError,
)
from .images import delete_images_on_commit

logger = logging.getLogger(__name__)


def _clean_card_name(name: Optional[str]) -> str:
    name = (name or '').strip()
    if not name:
        raise InvalidCardNameError("Card name cannot be empty")
    return name


def _get_owned_card(card_id: UUID, user: User, lock: bool = False) -> DiscountCard:
    queryset = DiscountCard.objects.all()
    if lock:
        queryset = queryset.select_for_update()

    try:
        card = queryset.get(id=card_id)
    except DiscountCard.DoesNotExist:
        raise CardNotFoundError(f"Card with ID {card_id} not found")

    if not card.is_owner(user):
        raise InsufficientPermissionsError("Only the card owner can access this card")

    return card


def get_user_cards(*, user: User) -> QuerySet:
    """The user's cards ordered by name, identifiers prefetched."""
    return (
        DiscountCard.objects
        .filter(owner=user)
        .prefetch_related('identifiers')
        .order_by('name')
    )


def get_card(*, card_id: UUID, user: User) -> DiscountCard:
    """
    Get one of the user's cards with its identifiers.

    Raises:
        CardNotFoundError: If card doesn't exist
        InsufficientPermissionsError: If user is not the owner
    """
    card = _get_owned_card(card_id, user)
    return get_user_cards(user=user).get(id=card.id)


@transaction.atomic
def create_card(*, owner: User, name: str, comment: Optional[str] = None) -> DiscountCard:
    """
    Create a new active card.

    Raises:
        InvalidCardNameError: If name is empty
    """
    return DiscountCard.objects.create(
        owner=owner,
        name=_clean_card_name(name),
        comment=comment or '',
    )


@transaction.atomic
def update_card(
    *,
    card_id: UUID,
    user: User,
    name: Optional[str] = None,
    comment: Optional[str] = None
) -> DiscountCard:
    """
    Rename a card and/or change its comment.

    Raises:
        CardNotFoundError: If card doesn't exist
        InsufficientPermissionsError: If user is not the owner
        InvalidCardNameError: If the new name is empty
    """
    card = _get_owned_card(card_id, user, lock=True)

    update_fields = ['updated_at']

    if name is not None:
        card.name = _clean_card_name(name)
        update_fields.append('name')

    if comment is not None:
        card.comment = comment
        update_fields.append('comment')

    card.save(update_fields=update_fields)
    return card


@transaction.atomic
def toggle_card(*, card_id: UUID, user: User) -> DiscountCard:
    """Flip the active flag of a card."""
    card = _get_owned_card(card_id, user, lock=True)
    card.toggle()
    return card


@transaction.atomic
def delete_card(*, card_id: UUID, user: User) -> None:
    """
    Delete a card and its identifiers.

    Stored images are removed after commit; a failed removal never
    undoes the deletion.

    Raises:
        CardNotFoundError: If card doesn't exist
        InsufficientPermissionsError: If user is not the owner
    """
    card = _get_owned_card(card_id, user, lock=True)

    image_paths = list(
        card.identifiers
        .exclude(image_path='')
        .values_list('image_path', flat=True)
    )

    card.delete()
    delete_images_on_commit(image_paths)

    logger.info(
        "Card %s deleted by user %s (%d image(s) queued for removal)",
        card_id, user.id, len(image_paths)
    )
