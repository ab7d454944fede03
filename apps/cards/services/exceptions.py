"""
Domain-specific exceptions for cards app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class CardsServiceError(Exception):
    """Base exception for all cards service errors."""
    pass


class CardNotFoundError(CardsServiceError):
    """Raised when a card does not exist, or cannot be resolved."""
    pass


class IdentifierNotFoundError(CardsServiceError):
    """Raised when a card identifier does not exist."""
    pass


class InvalidCardNameError(CardsServiceError):
    """Raised when a card name is empty."""
    pass


class InvalidIdentifierError(CardsServiceError):
    """Raised when an identifier has an unknown type or a missing value."""
    pass


class DuplicateIdentifierError(CardsServiceError):
    """Raised when an identifier value is already in use."""
    pass


class InsufficientPermissionsError(CardsServiceError):
    """Raised when a user touches a card they don't own."""
    pass
