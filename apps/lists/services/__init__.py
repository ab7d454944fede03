"""
Lists app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and concurrency protection.
"""

from .exceptions import (
    ListsServiceError,
    ListNotFoundError,
    ListItemNotFoundError,
    CatalogItemNotFoundError,
    InvalidListNameError,
    DuplicateListNameError,
    InvalidQuantityError,
    InvalidShareRecipientsError,
    InsufficientPermissionsError,
)

from .visibility import (
    visible_lists,
    can_view_list,
    get_list_for_user,
)

from .list_management import (
    create_list,
    update_list,
    delete_list,
)

from .sharing import (
    get_list_shares,
    update_list_shares,
)

from .list_items import (
    add_list_item,
    update_list_item,
    toggle_list_item,
    remove_list_item,
)


__all__ = [
    # Exceptions
    'ListsServiceError',
    'ListNotFoundError',
    'ListItemNotFoundError',
    'CatalogItemNotFoundError',
    'InvalidListNameError',
    'DuplicateListNameError',
    'InvalidQuantityError',
    'InvalidShareRecipientsError',
    'InsufficientPermissionsError',

    # Visibility
    'visible_lists',
    'can_view_list',
    'get_list_for_user',

    # List Management
    'create_list',
    'update_list',
    'delete_list',

    # Sharing
    'get_list_shares',
    'update_list_shares',

    # List Items
    'add_list_item',
    'update_list_item',
    'toggle_list_item',
    'remove_list_item',
]
