"""
Cards app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and concurrency protection.
"""

from .exceptions import (
    CardsServiceError,
    CardNotFoundError,
    IdentifierNotFoundError,
    InvalidCardNameError,
    InvalidIdentifierError,
    DuplicateIdentifierError,
    InsufficientPermissionsError,
)

from .card_management import (
    get_user_cards,
    get_card,
    create_card,
    update_card,
    toggle_card,
    delete_card,
)

from .identifier_management import (
    add_identifier,
    update_identifier,
    remove_identifier,
)

from .resolution import (
    resolve_card,
)


__all__ = [
    # Exceptions
    'CardsServiceError',
    'CardNotFoundError',
    'IdentifierNotFoundError',
    'InvalidCardNameError',
    'InvalidIdentifierError',
    'DuplicateIdentifierError',
    'InsufficientPermissionsError',

    # Card Management
    'get_user_cards',
    'get_card',
    'create_card',
    'update_card',
    'toggle_card',
    'delete_card',

    # Identifiers
    'add_identifier',
    'update_identifier',
    'remove_identifier',

    # Resolution
    'resolve_card',
]
