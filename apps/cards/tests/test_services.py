"""
Service layer unit tests for cards app.

Tests cover:
- Card CRUD restricted to the owner
- Identifier rules (manual needs a value, unique non-empty values)
- Image storage and best-effort cleanup after commit
- Resolution by identifier value
"""

import logging

import pytest
from uuid import uuid4
from django.core.files.storage import default_storage

from apps.cards.models import DiscountCard, CardIdentifier
from apps.cards.services import (
    get_user_cards,
    get_card,
    create_card,
    update_card,
    toggle_card,
    delete_card,
    add_identifier,
    update_identifier,
    remove_identifier,
    resolve_card,
)
from apps.cards.services import images
from apps.cards.services.exceptions import (
    CardNotFoundError,
    IdentifierNotFoundError,
    InvalidCardNameError,
    InvalidIdentifierError,
    DuplicateIdentifierError,
    InsufficientPermissionsError,
)


class BrokenStorage:
    def delete(self, path):
        raise OSError('storage unavailable')


# =============================================================================
# Cards
# =============================================================================

@pytest.mark.django_db
class TestCardManagement:

    def test_create_card(self, owner):
        card = create_card(owner=owner, name='  Bakery  ')

        assert card.name == 'Bakery'
        assert card.comment == ''
        assert card.is_active is True

    def test_create_card_empty_name(self, owner):
        with pytest.raises(InvalidCardNameError):
            create_card(owner=owner, name=' ')

    def test_user_cards_ordered_by_name(self, owner, stranger):
        create_card(owner=owner, name='Zoo')
        create_card(owner=owner, name='Apteka')
        create_card(owner=stranger, name='Bakery')

        assert [card.name for card in get_user_cards(user=owner)] == ['Apteka', 'Zoo']

    def test_get_card_with_identifiers(self, owner, card, manual_identifier):
        loaded = get_card(card_id=card.id, user=owner)
        assert list(loaded.identifiers.all()) == [manual_identifier]

    def test_get_card_of_someone_else(self, stranger, card):
        with pytest.raises(InsufficientPermissionsError):
            get_card(card_id=card.id, user=stranger)

    def test_get_missing_card(self, owner):
        with pytest.raises(CardNotFoundError):
            get_card(card_id=uuid4(), user=owner)

    def test_update_card(self, owner, card):
        updated = update_card(card_id=card.id, user=owner, name='Grocer Plus', comment='')

        assert updated.name == 'Grocer Plus'
        assert updated.comment == ''

    def test_update_card_keeps_omitted_fields(self, owner, card):
        updated = update_card(card_id=card.id, user=owner, name='Grocer Plus')
        assert updated.comment == 'gold tier'

    def test_update_card_not_owner(self, stranger, card):
        with pytest.raises(InsufficientPermissionsError):
            update_card(card_id=card.id, user=stranger, name='Mine')

    def test_toggle_card(self, owner, card):
        assert toggle_card(card_id=card.id, user=owner).is_active is False
        assert toggle_card(card_id=card.id, user=owner).is_active is True

    def test_toggle_card_not_owner(self, stranger, card):
        with pytest.raises(InsufficientPermissionsError):
            toggle_card(card_id=card.id, user=stranger)

    def test_delete_card_removes_identifiers(self, owner, card, manual_identifier):
        delete_card(card_id=card.id, user=owner)

        assert not DiscountCard.objects.filter(id=card.id).exists()
        assert not CardIdentifier.objects.filter(id=manual_identifier.id).exists()

    def test_delete_card_not_owner(self, stranger, card):
        with pytest.raises(InsufficientPermissionsError):
            delete_card(card_id=card.id, user=stranger)

        assert DiscountCard.objects.filter(id=card.id).exists()

    def test_delete_card_removes_images_after_commit(
        self, owner, card, screenshot, django_capture_on_commit_callbacks
    ):
        identifier = add_identifier(card_id=card.id, user=owner, type='screenshot', image=screenshot)
        assert default_storage.exists(identifier.image_path)

        with django_capture_on_commit_callbacks(execute=True):
            delete_card(card_id=card.id, user=owner)

        assert not default_storage.exists(identifier.image_path)

    def test_delete_card_survives_storage_failure(
        self, owner, card, screenshot, monkeypatch, caplog, django_capture_on_commit_callbacks
    ):
        add_identifier(card_id=card.id, user=owner, type='screenshot', image=screenshot)
        monkeypatch.setattr(images, 'default_storage', BrokenStorage())

        with caplog.at_level(logging.WARNING, logger='apps.cards.services.images'):
            with django_capture_on_commit_callbacks(execute=True):
                delete_card(card_id=card.id, user=owner)

        assert not DiscountCard.objects.filter(id=card.id).exists()
        assert 'Could not delete card image' in caplog.text


# =============================================================================
# Identifiers
# =============================================================================

@pytest.mark.django_db
class TestIdentifiers:

    def test_add_manual_identifier(self, owner, card):
        identifier = add_identifier(card_id=card.id, user=owner, type='manual', value=' 12345 ')

        assert identifier.value == '12345'
        assert identifier.image_path == ''
        assert identifier.card == card

    def test_manual_requires_value(self, owner, card):
        with pytest.raises(InvalidIdentifierError):
            add_identifier(card_id=card.id, user=owner, type='manual', value='')

    def test_unknown_type(self, owner, card):
        with pytest.raises(InvalidIdentifierError):
            add_identifier(card_id=card.id, user=owner, type='barcode', value='1')

    def test_screenshot_without_value(self, owner, card, screenshot):
        identifier = add_identifier(card_id=card.id, user=owner, type='screenshot', image=screenshot)

        assert identifier.value == ''
        assert identifier.image_path.startswith('cards/')
        assert identifier.image_path.endswith('.png')

    def test_screenshot_needs_value_or_image(self, owner, card):
        with pytest.raises(InvalidIdentifierError):
            add_identifier(card_id=card.id, user=owner, type='screenshot')

    def test_several_screenshots_without_value(self, owner, card, screenshot):
        add_identifier(card_id=card.id, user=owner, type='screenshot', image=screenshot)
        screenshot.seek(0)
        add_identifier(card_id=card.id, user=owner, type='screenshot', image=screenshot)

        assert card.identifiers.filter(value='').count() == 2

    def test_duplicate_value(self, owner, stranger, manual_identifier):
        other_card = create_card(owner=stranger, name='Other')

        with pytest.raises(DuplicateIdentifierError):
            add_identifier(card_id=other_card.id, user=stranger, type='manual', value='4601234567890')

    def test_add_to_someone_elses_card(self, stranger, card):
        with pytest.raises(InsufficientPermissionsError):
            add_identifier(card_id=card.id, user=stranger, type='manual', value='999')

    def test_add_to_missing_card(self, owner):
        with pytest.raises(CardNotFoundError):
            add_identifier(card_id=uuid4(), user=owner, type='manual', value='999')

    def test_update_value(self, owner, manual_identifier):
        identifier = update_identifier(
            identifier_id=manual_identifier.id, user=owner, type='manual', value='777'
        )
        assert identifier.value == '777'

    def test_update_to_own_value(self, owner, manual_identifier):
        identifier = update_identifier(
            identifier_id=manual_identifier.id, user=owner, type='manual', value='4601234567890'
        )
        assert identifier.value == '4601234567890'

    def test_update_to_taken_value(self, owner, card, manual_identifier):
        other = add_identifier(card_id=card.id, user=owner, type='manual', value='555')

        with pytest.raises(DuplicateIdentifierError):
            update_identifier(identifier_id=other.id, user=owner, type='manual', value='4601234567890')

    def test_update_replaces_image(
        self, owner, card, screenshot, django_capture_on_commit_callbacks
    ):
        identifier = add_identifier(card_id=card.id, user=owner, type='screenshot', image=screenshot)
        old_path = identifier.image_path

        screenshot.seek(0)
        with django_capture_on_commit_callbacks(execute=True):
            updated = update_identifier(
                identifier_id=identifier.id, user=owner, type='screenshot', image=screenshot
            )

        assert updated.image_path != old_path
        assert default_storage.exists(updated.image_path)
        assert not default_storage.exists(old_path)

    def test_update_keeps_image_by_default(self, owner, card, screenshot):
        identifier = add_identifier(card_id=card.id, user=owner, type='screenshot', image=screenshot)

        updated = update_identifier(
            identifier_id=identifier.id, user=owner, type='screenshot', value='ABC'
        )

        assert updated.image_path == identifier.image_path
        assert updated.value == 'ABC'

    def test_update_drops_image(
        self, owner, card, screenshot, django_capture_on_commit_callbacks
    ):
        identifier = add_identifier(
            card_id=card.id, user=owner, type='screenshot', value='ABC', image=screenshot
        )
        old_path = identifier.image_path

        with django_capture_on_commit_callbacks(execute=True):
            updated = update_identifier(
                identifier_id=identifier.id, user=owner, type='manual', value='ABC', keep_image=False
            )

        assert updated.image_path == ''
        assert updated.type == 'manual'
        assert not default_storage.exists(old_path)

    def test_update_by_stranger(self, stranger, manual_identifier):
        with pytest.raises(InsufficientPermissionsError):
            update_identifier(identifier_id=manual_identifier.id, user=stranger, type='manual', value='1')

    def test_update_missing(self, owner):
        with pytest.raises(IdentifierNotFoundError):
            update_identifier(identifier_id=uuid4(), user=owner, type='manual', value='1')

    def test_remove_identifier(
        self, owner, card, screenshot, django_capture_on_commit_callbacks
    ):
        identifier = add_identifier(card_id=card.id, user=owner, type='screenshot', image=screenshot)

        with django_capture_on_commit_callbacks(execute=True):
            returned_card = remove_identifier(identifier_id=identifier.id, user=owner)

        assert returned_card == card
        assert not CardIdentifier.objects.filter(id=identifier.id).exists()
        assert not default_storage.exists(identifier.image_path)

    def test_remove_by_stranger(self, stranger, manual_identifier):
        with pytest.raises(InsufficientPermissionsError):
            remove_identifier(identifier_id=manual_identifier.id, user=stranger)


# =============================================================================
# Resolution
# =============================================================================

@pytest.mark.django_db
class TestResolveCard:

    def test_resolves_active_card(self, card, manual_identifier):
        resolved = resolve_card(value='4601234567890')

        assert resolved == card
        assert [identifier.value for identifier in resolved.identifiers.all()] == ['4601234567890']

    def test_unknown_value(self, manual_identifier):
        with pytest.raises(CardNotFoundError):
            resolve_card(value='0000')

    def test_inactive_card_not_found(self, inactive_card):
        with pytest.raises(CardNotFoundError):
            resolve_card(value='OLD-001')

    def test_deactivated_card_not_found(self, owner, card, manual_identifier):
        toggle_card(card_id=card.id, user=owner)

        with pytest.raises(CardNotFoundError):
            resolve_card(value='4601234567890')

    def test_empty_value(self, card):
        with pytest.raises(CardNotFoundError):
            resolve_card(value='')
