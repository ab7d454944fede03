"""
Domain-specific exceptions for lists app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class ListsServiceError(Exception):
    """Base exception for all lists service errors."""
    pass


class ListNotFoundError(ListsServiceError):
    """Raised when a list does not exist or is not visible to the user."""
    pass


class ListItemNotFoundError(ListsServiceError):
    """Raised when a list entry does not exist on the given list."""
    pass


class CatalogItemNotFoundError(ListsServiceError):
    """Raised when the catalog item to add does not exist."""
    pass


class InvalidListNameError(ListsServiceError):
    """Raised when a list name is empty."""
    pass


class DuplicateListNameError(ListsServiceError):
    """Raised when a list name is already taken."""
    pass


class InvalidQuantityError(ListsServiceError):
    """Raised when a quantity is below 1."""
    pass


class InvalidShareRecipientsError(ListsServiceError):
    """Raised when the share recipients payload is malformed."""
    pass


class InsufficientPermissionsError(ListsServiceError):
    """Raised when a non-owner attempts an owner-only action."""
    pass
