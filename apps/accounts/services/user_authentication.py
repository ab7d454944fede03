"""User authentication services (password and external identity)."""

import logging
from typing import Optional

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import (
    InvalidCredentialsError,
    ExternalAccountError,
    InactiveAccountError,
    UserNotFoundError,
    DuplicateUserNameError,
)

User = get_user_model()

logger = logging.getLogger(__name__)


def _find_by_login(login: str) -> Optional[User]:
    """Match a login string against user name first, then email."""
    user = User.objects.select_for_update().filter(name=login).first()
    if user is None and login:
        user = User.objects.select_for_update().filter(email__iexact=login).first()
    return user


def _touch_last_login(user: User) -> None:
    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])


@transaction.atomic
def authenticate_user(*, login: str, password: str) -> User:
    """
    Authenticate user with name (or email) and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        login: User's name or email
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        UserNotFoundError: If no user matches the login
        ExternalAccountError: If the account has no password set
        InvalidCredentialsError: If password is wrong
        InactiveAccountError: If account is deactivated
    """
    login = (login or '').strip()
    user = _find_by_login(login)
    if user is None:
        raise UserNotFoundError(f"User '{login}' not found")

    if not user.has_usable_password():
        raise ExternalAccountError("This account uses external sign-in")

    if not user.check_password(password):
        raise InvalidCredentialsError("Invalid password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    _touch_last_login(user)

    return user


@transaction.atomic
def login_with_external_identity(*, subject: str, email: Optional[str] = None) -> User:
    """
    Sign in with an identity already verified by an external provider.

    Resolution order:
    1. Account already linked to ``subject``
    2. Account with the same email, which gets linked
    3. New account named after the email, without a password

    Raises:
        InactiveAccountError: If the matched account is deactivated
        DuplicateUserNameError: If a new account cannot take the email as name
    """
    user = User.objects.select_for_update().filter(external_id=subject).first()

    if user is None and email:
        user = User.objects.select_for_update().filter(email__iexact=email).first()
        if user is not None:
            user.external_id = subject
            user.save(update_fields=['external_id', 'updated_at'])
            logger.info("Linked external identity to user %s", user.id)

    if user is None:
        name = email or subject
        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    name=name,
                    password=None,
                    email=email,
                    external_id=subject,
                )
        except IntegrityError:
            raise DuplicateUserNameError(f"User '{name}' already exists")
        logger.info("Created user %s from external identity", user.id)

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    _touch_last_login(user)

    return user
