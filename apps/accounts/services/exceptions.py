"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class InvalidUserNameError(AccountsServiceError):
    """Raised when a user name is empty."""
    pass


class InvalidPasswordError(AccountsServiceError):
    """Raised when a new password fails validation."""
    pass


class DuplicateUserNameError(AccountsServiceError):
    """Raised when a user name is already taken."""
    pass


class DuplicateEmailError(AccountsServiceError):
    """Raised when an email is already used by another account."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class ExternalAccountError(AccountsServiceError):
    """Raised on password login to an account that only has external sign-in."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    pass
