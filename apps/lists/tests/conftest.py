import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.catalog.models import Category, Unit, Item
from apps.lists.models import ShoppingList, ListShare, ListItem


def client_for(user):
    """Return an API client authenticated as ``user``."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def alice(db):
    """List owner."""
    return User.objects.create_user(name='Alice', password='alicepass')


@pytest.fixture
def bob(db):
    return User.objects.create_user(name='Bob', password='bobpass')


@pytest.fixture
def charlie(db):
    return User.objects.create_user(name='Charlie', password='charliepass')


@pytest.fixture
def alice_client(alice):
    return client_for(alice)


@pytest.fixture
def bob_client(bob):
    return client_for(bob)


@pytest.fixture
def charlie_client(charlie):
    return client_for(charlie)


@pytest.fixture
def camping(alice):
    """Alice's private list."""
    return ShoppingList.objects.create(name='Camping', owner=alice, is_shared=False)


@pytest.fixture
def groceries(alice):
    """Alice's globally shared list."""
    return ShoppingList.objects.create(name='Groceries', owner=alice, is_shared=True)


@pytest.fixture
def camping_shared_with_bob(camping, bob):
    ListShare.objects.create(list=camping, user=bob)
    return camping


@pytest.fixture
def milk(db):
    category = Category.objects.create(name='Dairy')
    unit = Unit.objects.create(name='l')
    return Item.objects.create(name='Milk', category=category, unit=unit)


@pytest.fixture
def tent(db):
    category = Category.objects.create(name='Outdoor')
    unit = Unit.objects.create(name='pcs')
    return Item.objects.create(name='Tent', category=category, unit=unit)


@pytest.fixture
def camping_entry(camping, tent):
    return ListItem.objects.create(list=camping, item=tent, quantity=1)


@pytest.fixture
def groceries_entry(groceries, milk):
    return ListItem.objects.create(list=groceries, item=milk, quantity=2, comment='skimmed')
