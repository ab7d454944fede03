"""
Domain-specific exceptions for catalog app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class CatalogServiceError(Exception):
    """Base exception for all catalog service errors."""
    pass


class InvalidCatalogNameError(CatalogServiceError):
    """Raised when a category, unit or item name is empty."""
    pass


class CategoryNotFoundError(CatalogServiceError):
    """Raised when a category does not exist."""
    pass


class UnitNotFoundError(CatalogServiceError):
    """Raised when a unit does not exist."""
    pass


class ItemNotFoundError(CatalogServiceError):
    """Raised when a catalog item does not exist."""
    pass


class DuplicateCategoryError(CatalogServiceError):
    """Raised when a category name is already taken."""
    pass


class DuplicateUnitError(CatalogServiceError):
    """Raised when a unit name is already taken."""
    pass


class DuplicateItemError(CatalogServiceError):
    """Raised when an item name is already taken."""
    pass


class ProtectedDefaultCategoryError(CatalogServiceError):
    """Raised when deleting or renaming the fallback category."""
    pass


class UnitInUseError(CatalogServiceError):
    """Raised when deleting a unit that items still reference."""
    pass
