"""User registration service."""

import logging
from typing import Optional

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import transaction, IntegrityError

from .exceptions import (
    InvalidUserNameError,
    InvalidPasswordError,
    DuplicateUserNameError,
    DuplicateEmailError,
)

User = get_user_model()

logger = logging.getLogger(__name__)


def clean_user_name(name: Optional[str]) -> str:
    """Trim a user name, rejecting empty values."""
    name = (name or '').strip()
    if not name:
        raise InvalidUserNameError("User name cannot be empty")
    return name


def check_new_password(password: Optional[str], user=None) -> None:
    """Run the configured password validators (minimum length 4)."""
    if not password or not password.strip():
        raise InvalidPasswordError("Password cannot be empty")
    try:
        validate_password(password, user=user)
    except ValidationError as e:
        raise InvalidPasswordError(' '.join(e.messages))


@transaction.atomic
def register_user(
    *,
    name: str,
    password: str,
    email: Optional[str] = None
) -> User:
    """
    Register a new user with a password.

    Args:
        name: Unique user name (trimmed)
        password: User's password (will be hashed)
        email: Optional email address

    Returns:
        Created User instance

    Raises:
        InvalidUserNameError: If name is empty
        InvalidPasswordError: If password is too short
        DuplicateUserNameError: If name is taken
        DuplicateEmailError: If email is taken
    """
    name = clean_user_name(name)
    check_new_password(password)
    email = (email or '').strip() or None

    if User.objects.filter(name=name).exists():
        raise DuplicateUserNameError(f"User '{name}' already exists")

    if email and User.objects.filter(email__iexact=email).exists():
        raise DuplicateEmailError(f"Email '{email}' is already in use")

    try:
        # Savepoint so a concurrent insert surfaces as a conflict
        with transaction.atomic():
            user = User.objects.create_user(
                name=name,
                password=password,
                email=email,
            )
    except IntegrityError:
        raise DuplicateUserNameError(f"User '{name}' already exists")

    logger.info("Registered user %s", user.id)
    return user
