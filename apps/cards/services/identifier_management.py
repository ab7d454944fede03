"""
Card identifier service.

Handles adding, editing and removing the codes attached to a card,
including the uploaded screenshot of each code.
"""

from typing import Optional, Tuple
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.accounts.models import User
from apps.cards.models import DiscountCard, CardIdentifier

from .card_management import _get_owned_card
from .exceptions import (
    IdentifierNotFoundError,
    InvalidIdentifierError,
    DuplicateIdentifierError,
    InsufficientPermissionsError,
)
from .images import save_image, delete_image, delete_images_on_commit


def _clean_identifier(type: str, value: Optional[str]) -> Tuple[str, str]:
    if type not in CardIdentifier.Type.values:
        raise InvalidIdentifierError(f"Unknown identifier type: {type}")

    value = (value or '').strip()
    if type == CardIdentifier.Type.MANUAL and not value:
        raise InvalidIdentifierError("A manual identifier needs a value")

    return type, value


def _check_value_available(value: str, exclude_id: Optional[UUID] = None) -> None:
    if not value:
        return

    taken = CardIdentifier.objects.filter(value=value)
    if exclude_id is not None:
        taken = taken.exclude(id=exclude_id)

    if taken.exists():
        raise DuplicateIdentifierError(f"Identifier '{value}' is already in use")


def _save_identifier(identifier: CardIdentifier, new_image_path: str) -> None:
    # Savepoint so the uniqueness race surfaces as a domain error
    try:
        with transaction.atomic():
            identifier.save()
    except IntegrityError:
        delete_image(new_image_path)
        raise DuplicateIdentifierError(f"Identifier '{identifier.value}' is already in use")


def _get_owned_identifier(identifier_id: UUID, user: User) -> CardIdentifier:
    try:
        identifier = (
            CardIdentifier.objects
            .select_for_update()
            .select_related('card')
            .get(id=identifier_id)
        )
    except CardIdentifier.DoesNotExist:
        raise IdentifierNotFoundError(f"Identifier with ID {identifier_id} not found")

    if not identifier.card.is_owner(user):
        raise InsufficientPermissionsError("Only the card owner can change its identifiers")

    return identifier


@transaction.atomic
def add_identifier(
    *,
    card_id: UUID,
    user: User,
    type: str,
    value: Optional[str] = None,
    image=None
) -> CardIdentifier:
    """
    Attach an identifier to a card.

    Args:
        card_id: UUID of the card
        user: User adding the identifier (must be owner)
        type: ``manual`` or ``screenshot``
        value: Code printed on the card; required for ``manual``
        image: Optional uploaded screenshot

    Raises:
        CardNotFoundError: If card doesn't exist
        InsufficientPermissionsError: If user is not the owner
        InvalidIdentifierError: If type is unknown or a value/image is missing
        DuplicateIdentifierError: If the value is already used
    """
    card = _get_owned_card(card_id, user, lock=True)
    type, value = _clean_identifier(type, value)

    if not value and image is None:
        raise InvalidIdentifierError("A screenshot identifier needs a value or an image")

    _check_value_available(value)

    image_path = save_image(image) if image is not None else ''
    identifier = CardIdentifier(card=card, type=type, value=value, image_path=image_path)
    _save_identifier(identifier, image_path)

    return identifier


@transaction.atomic
def update_identifier(
    *,
    identifier_id: UUID,
    user: User,
    type: str,
    value: Optional[str] = None,
    image=None,
    keep_image: bool = True
) -> CardIdentifier:
    """
    Replace type and value of an identifier.

    A newly uploaded image replaces the stored one. Without an upload the
    stored image stays unless ``keep_image`` is false. Replaced images are
    removed after commit.

    Raises:
        IdentifierNotFoundError: If identifier doesn't exist
        InsufficientPermissionsError: If user is not the owner of its card
        InvalidIdentifierError: If type is unknown or a value/image is missing
        DuplicateIdentifierError: If the value is used by another identifier
    """
    identifier = _get_owned_identifier(identifier_id, user)
    type, value = _clean_identifier(type, value)

    will_have_image = image is not None or (keep_image and bool(identifier.image_path))
    if not value and not will_have_image:
        raise InvalidIdentifierError("A screenshot identifier needs a value or an image")

    _check_value_available(value, exclude_id=identifier.id)

    old_image_path = identifier.image_path
    new_image_path = ''

    if image is not None:
        new_image_path = save_image(image)
        identifier.image_path = new_image_path
    elif not keep_image:
        identifier.image_path = ''

    identifier.type = type
    identifier.value = value
    _save_identifier(identifier, new_image_path)

    if old_image_path and identifier.image_path != old_image_path:
        delete_images_on_commit([old_image_path])

    return identifier


@transaction.atomic
def remove_identifier(*, identifier_id: UUID, user: User) -> DiscountCard:
    """
    Remove an identifier and, after commit, its image.

    Returns:
        The card the identifier belonged to
    """
    identifier = _get_owned_identifier(identifier_id, user)
    card = identifier.card

    image_path = identifier.image_path
    identifier.delete()
    delete_images_on_commit([image_path])

    return card
