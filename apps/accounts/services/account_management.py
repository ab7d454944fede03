"""Account management service."""

from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet
from django.contrib.auth import get_user_model

from .exceptions import (
    UserNotFoundError,
    DuplicateUserNameError,
    DuplicateEmailError,
)
from .user_registration import clean_user_name, check_new_password

User = get_user_model()


def _get_user_for_update(user_id: UUID) -> User:
    try:
        return User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")


def get_user_by_id(*, user_id: UUID) -> User:
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")


def get_profile(*, user_id: UUID) -> dict:
    """
    Profile of a user as shown on the account page.

    Raises:
        UserNotFoundError: If the user doesn't exist
    """
    user = get_user_by_id(user_id=user_id)
    return {
        'id': user.id,
        'name': user.name,
        'email': user.email,
        'has_password': user.has_password,
        'has_external_identity': user.has_external_identity,
        'created_at': user.created_at,
    }


@transaction.atomic
def update_user_name(*, user_id: UUID, name: str) -> User:
    """
    Rename a user.

    Raises:
        InvalidUserNameError: If name is empty
        DuplicateUserNameError: If another user has the name
    """
    name = clean_user_name(name)
    user = _get_user_for_update(user_id)

    if User.objects.filter(name=name).exclude(id=user.id).exists():
        raise DuplicateUserNameError(f"Name '{name}' is already taken")

    user.name = name
    try:
        with transaction.atomic():
            user.save(update_fields=['name', 'updated_at'])
    except IntegrityError:
        raise DuplicateUserNameError(f"Name '{name}' is already taken")

    return user


@transaction.atomic
def update_user_email(*, user_id: UUID, email: Optional[str]) -> User:
    """
    Set or clear a user's email. Blank clears it.

    Raises:
        DuplicateEmailError: If another user has the email
    """
    email = (email or '').strip() or None
    user = _get_user_for_update(user_id)

    if email and User.objects.filter(email__iexact=email).exclude(id=user.id).exists():
        raise DuplicateEmailError(f"Email '{email}' is already in use")

    user.email = User.objects.normalize_email(email) if email else None
    try:
        with transaction.atomic():
            user.save(update_fields=['email', 'updated_at'])
    except IntegrityError:
        raise DuplicateEmailError(f"Email '{email}' is already in use")

    return user


@transaction.atomic
def change_password(*, user_id: UUID, new_password: str) -> User:
    """
    Set a new password. Also how external-only accounts gain a password.

    Raises:
        InvalidPasswordError: If the password is shorter than 4 characters
    """
    user = _get_user_for_update(user_id)
    check_new_password(new_password, user=user)

    user.set_password(new_password)
    user.save(update_fields=['password', 'updated_at'])

    return user


def list_users() -> QuerySet:
    """Active users ordered by name, for picking share recipients."""
    return User.objects.filter(is_active=True).order_by('name')
