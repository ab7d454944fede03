"""
Card lookup by identifier value.

Used by scanners at the till, so an inactive card answers exactly like
an unknown code.
"""

from apps.cards.models import DiscountCard, CardIdentifier

from .exceptions import CardNotFoundError


def resolve_card(*, value: str) -> DiscountCard:
    """
    Find the active card owning the identifier with this exact value.

    Raises:
        CardNotFoundError: If no identifier matches or its card is inactive
    """
    value = (value or '').strip()
    if not value:
        raise CardNotFoundError("No card found for an empty identifier")

    identifier = (
        CardIdentifier.objects
        .select_related('card')
        .filter(value=value)
        .first()
    )

    if identifier is None or not identifier.card.is_active:
        raise CardNotFoundError(f"No card found for identifier '{value}'")

    return (
        DiscountCard.objects
        .prefetch_related('identifiers')
        .get(id=identifier.card_id)
    )
