"""
Catalog app services layer.

Categories, units and items are shared by all users.
"""

from .exceptions import (
    CatalogServiceError,
    InvalidCatalogNameError,
    CategoryNotFoundError,
    UnitNotFoundError,
    ItemNotFoundError,
    DuplicateCategoryError,
    DuplicateUnitError,
    DuplicateItemError,
    ProtectedDefaultCategoryError,
    UnitInUseError,
)

from .category_management import (
    get_categories,
    get_category_by_id,
    create_category,
    update_category,
    delete_category,
)

from .unit_management import (
    get_units,
    get_unit_by_id,
    create_unit,
    update_unit,
    delete_unit,
)

from .item_management import (
    search_items,
    get_item_by_id,
    create_item,
    update_item,
    delete_item,
)


__all__ = [
    # Exceptions
    'CatalogServiceError',
    'InvalidCatalogNameError',
    'CategoryNotFoundError',
    'UnitNotFoundError',
    'ItemNotFoundError',
    'DuplicateCategoryError',
    'DuplicateUnitError',
    'DuplicateItemError',
    'ProtectedDefaultCategoryError',
    'UnitInUseError',

    # Categories
    'get_categories',
    'get_category_by_id',
    'create_category',
    'update_category',
    'delete_category',

    # Units
    'get_units',
    'get_unit_by_id',
    'create_unit',
    'update_unit',
    'delete_unit',

    # Items
    'search_items',
    'get_item_by_id',
    'create_item',
    'update_item',
    'delete_item',
]
