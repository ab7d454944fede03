import pytest
from uuid import uuid4
from django.urls import reverse
from rest_framework import status

from apps.lists.models import ShoppingList, ListShare, ListItem


def detail_url(shopping_list):
    return reverse('lists:shopping-list-detail', kwargs={'pk': shopping_list.id})


@pytest.mark.django_db
class TestListEndpoints:

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('lists:shopping-list-list'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_list_shows_visible_lists(self, bob_client, camping, groceries):
        response = bob_client.get(reverse('lists:shopping-list-list'))

        assert response.status_code == status.HTTP_200_OK
        names = [entry['name'] for entry in response.data['results']]
        assert names == ['Groceries']

    def test_list_marks_owner(self, alice_client, groceries, groceries_entry):
        response = alice_client.get(reverse('lists:shopping-list-list'))

        entry = response.data['results'][0]
        assert entry['is_owner'] is True
        assert entry['item_count'] == 1
        assert entry['owner']['name'] == 'Alice'

    def test_create_list(self, alice_client):
        response = alice_client.post(
            reverse('lists:shopping-list-list'),
            {'name': 'Party'},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Party'
        assert response.data['is_shared'] is True
        assert ShoppingList.objects.filter(name='Party').exists()

    def test_create_duplicate(self, bob_client, camping):
        response = bob_client.post(
            reverse('lists:shopping-list-list'),
            {'name': 'Camping'},
            format='json'
        )
        assert response.status_code == status.HTTP_409_CONFLICT

    def test_retrieve_with_items(self, bob_client, groceries, groceries_entry):
        response = bob_client.get(detail_url(groceries))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['is_owner'] is False
        item = response.data['items'][0]
        assert item['item_name'] == 'Milk'
        assert item['unit_name'] == 'l'
        assert item['category_name'] == 'Dairy'
        assert item['quantity'] == 2
        assert item['comment'] == 'skimmed'

    def test_retrieve_invisible_list(self, bob_client, camping):
        response = bob_client.get(detail_url(camping))
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_retrieve_malformed_id(self, alice_client):
        response = alice_client.get('/api/lists/not-a-uuid/')
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_dashes_only_id(self, alice_client, camping):
        dashes = '-' * 36
        assert alice_client.get(f'/api/lists/{dashes}/').status_code == status.HTTP_404_NOT_FOUND
        response = alice_client.delete(f'/api/lists/{camping.id}/items/{dashes}/')
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_owner_renames(self, alice_client, camping):
        response = alice_client.patch(detail_url(camping), {'name': 'Hiking'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        camping.refresh_from_db()
        assert camping.name == 'Hiking'

    def test_owner_toggles_global_share(self, alice_client, camping):
        response = alice_client.patch(detail_url(camping), {'is_shared': True}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['is_shared'] is True

    def test_viewer_cannot_rename(self, bob_client, groceries):
        response = bob_client.patch(detail_url(groceries), {'name': 'Mine'}, format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_stranger_gets_not_found_on_update(self, bob_client, camping):
        response = bob_client.patch(detail_url(camping), {'name': 'Mine'}, format='json')
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_owner_deletes(self, alice_client, camping):
        response = alice_client.delete(detail_url(camping))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not ShoppingList.objects.filter(id=camping.id).exists()

    def test_viewer_cannot_delete(self, bob_client, groceries):
        response = bob_client.delete(detail_url(groceries))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert ShoppingList.objects.filter(id=groceries.id).exists()


@pytest.mark.django_db
class TestShareEndpoints:

    def url(self, shopping_list):
        return reverse('lists:shopping-list-shares', kwargs={'pk': shopping_list.id})

    def test_camping_scenario(self, alice_client, bob_client, bob, camping):
        response = alice_client.put(self.url(camping), {'user_ids': [str(bob.id)]}, format='json')
        assert response.status_code == status.HTTP_200_OK
        assert response.data['user_ids'] == [str(bob.id)]

        assert bob_client.get(detail_url(camping)).status_code == status.HTTP_200_OK

        alice_client.put(self.url(camping), {'user_ids': []}, format='json')
        assert bob_client.get(detail_url(camping)).status_code == status.HTTP_404_NOT_FOUND

    def test_get_shares(self, alice_client, bob, camping_shared_with_bob):
        response = alice_client.get(self.url(camping_shared_with_bob))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user_ids'] == [str(bob.id)]

    def test_non_owner_forbidden(self, bob_client, charlie, camping_shared_with_bob):
        response = bob_client.put(
            self.url(camping_shared_with_bob),
            {'user_ids': [str(charlie.id)]},
            format='json'
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not ListShare.objects.filter(user=charlie).exists()

    def test_non_owner_forbidden_with_bad_payload(self, bob_client, groceries):
        response = bob_client.put(self.url(groceries), {'user_ids': 'garbage'}, format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_invisible_list_not_found(self, bob_client, charlie, camping):
        response = bob_client.put(self.url(camping), {'user_ids': [str(charlie.id)]}, format='json')
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert bob_client.get(self.url(camping)).status_code == status.HTTP_404_NOT_FOUND
        assert not ListShare.objects.filter(list=camping).exists()

    def test_bad_payload(self, alice_client, camping):
        response = alice_client.put(self.url(camping), {'user_ids': ['nope']}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_missing_payload(self, alice_client, camping):
        response = alice_client.put(self.url(camping), {}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.parametrize('payload', [5, True, 1.5, {'id': 1}])
    def test_scalar_payload(self, alice_client, camping, payload):
        response = alice_client.put(self.url(camping), {'user_ids': payload}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_list(self, alice_client):
        response = alice_client.put(
            reverse('lists:shopping-list-shares', kwargs={'pk': uuid4()}),
            {'user_ids': []},
            format='json'
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestListItemEndpoints:

    def test_add_item(self, bob_client, groceries, milk):
        response = bob_client.post(
            reverse('lists:shopping-list-items', kwargs={'pk': groceries.id}),
            {'item_id': str(milk.id), 'quantity': 3},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['item_name'] == 'Milk'
        assert response.data['quantity'] == 3
        assert response.data['is_checked'] is False

    def test_add_unknown_item(self, alice_client, camping):
        response = alice_client.post(
            reverse('lists:shopping-list-items', kwargs={'pk': camping.id}),
            {'item_id': str(uuid4())},
            format='json'
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_add_to_invisible_list(self, bob_client, camping, tent):
        response = bob_client.post(
            reverse('lists:shopping-list-items', kwargs={'pk': camping.id}),
            {'item_id': str(tent.id)},
            format='json'
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_add_zero_quantity(self, alice_client, camping, tent):
        response = alice_client.post(
            reverse('lists:shopping-list-items', kwargs={'pk': camping.id}),
            {'item_id': str(tent.id), 'quantity': 0},
            format='json'
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_entry(self, bob_client, groceries, groceries_entry):
        url = reverse(
            'lists:shopping-list-item-detail',
            kwargs={'pk': groceries.id, 'list_item_id': groceries_entry.id}
        )
        response = bob_client.patch(url, {'quantity': 5, 'comment': ''}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['quantity'] == 5
        assert response.data['comment'] == ''

    def test_toggle_entry(self, alice_client, camping, camping_entry):
        url = reverse(
            'lists:shopping-list-item-toggle',
            kwargs={'pk': camping.id, 'list_item_id': camping_entry.id}
        )

        assert alice_client.post(url).data['is_checked'] is True
        assert alice_client.post(url).data['is_checked'] is False

    def test_remove_entry(self, alice_client, camping, camping_entry):
        url = reverse(
            'lists:shopping-list-item-detail',
            kwargs={'pk': camping.id, 'list_item_id': camping_entry.id}
        )
        response = alice_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not ListItem.objects.filter(id=camping_entry.id).exists()

    def test_entry_of_other_list(self, alice_client, groceries, camping_entry):
        url = reverse(
            'lists:shopping-list-item-detail',
            kwargs={'pk': groceries.id, 'list_item_id': camping_entry.id}
        )
        response = alice_client.delete(url)
        assert response.status_code == status.HTTP_404_NOT_FOUND
