import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user with a password and email."""
    return User.objects.create_user(
        name='carol',
        password='mypassword',
        email='carol@example.com',
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        name='dave',
        password='otherpass',
        email='dave@example.com',
    )


@pytest.fixture
def external_user(db):
    """User that signs in only through an external identity provider."""
    return User.objects.create_user(
        name='googlebob',
        password=None,
        email='bob@gmail.com',
        external_id='google-subject-bob',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        name='inactive',
        password='inactivepass',
        is_active=False,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
