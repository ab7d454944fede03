"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InvalidUserNameError,
    InvalidPasswordError,
    DuplicateUserNameError,
    DuplicateEmailError,
    InvalidCredentialsError,
    ExternalAccountError,
    InactiveAccountError,
    UserNotFoundError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user, login_with_external_identity
from .account_management import (
    get_user_by_id,
    get_profile,
    update_user_name,
    update_user_email,
    change_password,
    list_users,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidUserNameError',
    'InvalidPasswordError',
    'DuplicateUserNameError',
    'DuplicateEmailError',
    'InvalidCredentialsError',
    'ExternalAccountError',
    'InactiveAccountError',
    'UserNotFoundError',
    # Services
    'register_user',
    'authenticate_user',
    'login_with_external_identity',
    'get_user_by_id',
    'get_profile',
    'update_user_name',
    'update_user_email',
    'change_password',
    'list_users',
]
