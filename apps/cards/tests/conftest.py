import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.cards.models import DiscountCard, CardIdentifier


def client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Keep uploaded card images out of the real media directory."""
    settings.MEDIA_ROOT = str(tmp_path)
    return tmp_path


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def owner(db):
    return User.objects.create_user(name='Olga', password='olgapass')


@pytest.fixture
def stranger(db):
    return User.objects.create_user(name='Sam', password='sampass')


@pytest.fixture
def owner_client(owner):
    return client_for(owner)


@pytest.fixture
def stranger_client(stranger):
    return client_for(stranger)


@pytest.fixture
def card(owner):
    """Active card with one manual identifier."""
    return DiscountCard.objects.create(owner=owner, name='Grocer', comment='gold tier')


@pytest.fixture
def manual_identifier(card):
    return CardIdentifier.objects.create(card=card, type=CardIdentifier.Type.MANUAL, value='4601234567890')


@pytest.fixture
def inactive_card(owner):
    inactive = DiscountCard.objects.create(owner=owner, name='Old Pharmacy', is_active=False)
    CardIdentifier.objects.create(card=inactive, type=CardIdentifier.Type.MANUAL, value='OLD-001')
    return inactive


@pytest.fixture
def screenshot():
    """Small uploaded file standing in for a barcode screenshot."""
    return SimpleUploadedFile('barcode.png', b'\x89PNG fake image bytes', content_type='image/png')
