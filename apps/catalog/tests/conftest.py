import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.catalog.models import Category, Unit, Item


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def catalog_user(db):
    return User.objects.create_user(name='shopper', password='secret')


@pytest.fixture
def authenticated_client(api_client, catalog_user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(catalog_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def default_category(db):
    """Fallback category (seeded by migration)."""
    return Category.get_default()


@pytest.fixture
def dairy(db):
    return Category.objects.create(name='Dairy', comment='Milk and cheese')


@pytest.fixture
def bakery(db):
    return Category.objects.create(name='Bakery')


@pytest.fixture
def pcs(db):
    return Unit.objects.create(name='pcs')


@pytest.fixture
def litre(db):
    return Unit.objects.create(name='l')


@pytest.fixture
def dairy_items(dairy, pcs, litre):
    """Three items in the Dairy category."""
    return [
        Item.objects.create(name='Milk', category=dairy, unit=litre),
        Item.objects.create(name='Butter', category=dairy, unit=pcs),
        Item.objects.create(name='Cheese', category=dairy, unit=pcs),
    ]


@pytest.fixture
def bread(bakery, pcs):
    return Item.objects.create(name='Bread', category=bakery, unit=pcs)
