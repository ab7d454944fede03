"""
Service layer unit tests for catalog app.

Tests cover:
- Category reassignment on delete
- Name uniqueness translated to domain conflicts
- Item search ordering and case-insensitivity
"""

import pytest
from uuid import uuid4

from apps.catalog.models import Category, Unit, Item, DEFAULT_CATEGORY_NAME
from apps.catalog.services import (
    get_categories,
    create_category,
    update_category,
    delete_category,
    create_unit,
    update_unit,
    delete_unit,
    search_items,
    create_item,
    update_item,
    delete_item,
)
from apps.catalog.services.exceptions import (
    InvalidCatalogNameError,
    CategoryNotFoundError,
    UnitNotFoundError,
    ItemNotFoundError,
    DuplicateCategoryError,
    DuplicateUnitError,
    DuplicateItemError,
    ProtectedDefaultCategoryError,
    UnitInUseError,
)


# =============================================================================
# Categories
# =============================================================================

@pytest.mark.django_db
class TestCategoryManagement:

    def test_default_category_seeded(self):
        assert Category.objects.filter(name=DEFAULT_CATEGORY_NAME).exists()

    def test_create_category(self):
        category = create_category(name=' Frozen ', comment='Freezer aisle')

        assert category.name == 'Frozen'
        assert category.comment == 'Freezer aisle'

    def test_create_category_empty_name(self):
        with pytest.raises(InvalidCatalogNameError):
            create_category(name='  ')

    def test_create_duplicate_category(self, dairy):
        with pytest.raises(DuplicateCategoryError):
            create_category(name='Dairy')

    def test_categories_ordered_with_counts(self, dairy_items, bread):
        categories = list(get_categories())
        names = [c.name for c in categories]

        assert names == sorted(names)
        counts = {c.name: c.item_count for c in categories}
        assert counts['Dairy'] == 3
        assert counts['Bakery'] == 1

    def test_update_category(self, dairy):
        updated = update_category(category_id=dairy.id, name='Milk products', comment='')

        assert updated.name == 'Milk products'
        assert updated.comment == ''

    def test_update_category_duplicate(self, dairy, bakery):
        with pytest.raises(DuplicateCategoryError):
            update_category(category_id=dairy.id, name='Bakery')

    def test_cannot_rename_default(self, default_category):
        with pytest.raises(ProtectedDefaultCategoryError):
            update_category(category_id=default_category.id, name='Other')

    def test_delete_category_reassigns_items(self, dairy, dairy_items):
        moved = delete_category(category_id=dairy.id)

        assert moved == 3
        assert not Category.objects.filter(name='Dairy').exists()
        default = Category.objects.get(name=DEFAULT_CATEGORY_NAME)
        for item in dairy_items:
            item.refresh_from_db()
            assert item.category_id == default.id

    def test_delete_category_recreates_missing_default(self, dairy, dairy_items):
        Category.objects.filter(name=DEFAULT_CATEGORY_NAME).delete()

        delete_category(category_id=dairy.id)

        assert Item.objects.filter(category__name=DEFAULT_CATEGORY_NAME).count() == 3

    def test_cannot_delete_default(self, default_category):
        with pytest.raises(ProtectedDefaultCategoryError):
            delete_category(category_id=default_category.id)

    def test_delete_missing_category(self):
        with pytest.raises(CategoryNotFoundError):
            delete_category(category_id=uuid4())


# =============================================================================
# Units
# =============================================================================

@pytest.mark.django_db
class TestUnitManagement:

    def test_create_unit(self):
        assert create_unit(name='kg').name == 'kg'

    def test_create_duplicate_unit(self, pcs):
        with pytest.raises(DuplicateUnitError):
            create_unit(name='pcs')

    def test_rename_unit(self, pcs):
        assert update_unit(unit_id=pcs.id, name='pieces').name == 'pieces'

    def test_delete_unused_unit(self, pcs):
        delete_unit(unit_id=pcs.id)
        assert not Unit.objects.filter(id=pcs.id).exists()

    def test_delete_unit_in_use(self, bread, pcs):
        with pytest.raises(UnitInUseError):
            delete_unit(unit_id=pcs.id)

    def test_delete_missing_unit(self):
        with pytest.raises(UnitNotFoundError):
            delete_unit(unit_id=uuid4())


# =============================================================================
# Items
# =============================================================================

@pytest.mark.django_db
class TestItemManagement:

    def test_search_case_insensitive_substring(self, dairy_items, bread):
        names = [i.name for i in search_items(query='E')]
        assert names == ['Bread', 'Butter', 'Cheese']

    def test_empty_search_returns_all_ordered(self, dairy_items, bread):
        names = [i.name for i in search_items(query='')]
        assert names == ['Bread', 'Butter', 'Cheese', 'Milk']

    def test_search_folds_cyrillic_case(self, dairy, litre, dairy_items):
        create_item(name='Молоко', category_id=dairy.id, unit_id=litre.id)

        assert [i.name for i in search_items(query='молоко')] == ['Молоко']
        assert [i.name for i in search_items(query='МОЛ')] == ['Молоко']

    def test_search_follows_rename(self, bread):
        update_item(item_id=bread.id, name='Хлеб')

        assert [i.name for i in search_items(query='хЛЕБ')] == ['Хлеб']
        assert search_items(query='bread').count() == 0

    def test_create_item(self, dairy, litre):
        item = create_item(name='Kefir', category_id=dairy.id, unit_id=litre.id)

        assert item.category == dairy
        assert item.unit == litre

    def test_create_item_unknown_category(self, litre):
        with pytest.raises(CategoryNotFoundError):
            create_item(name='Kefir', category_id=uuid4(), unit_id=litre.id)

    def test_create_item_unknown_unit(self, dairy):
        with pytest.raises(UnitNotFoundError):
            create_item(name='Kefir', category_id=dairy.id, unit_id=uuid4())

    def test_create_duplicate_item(self, dairy_items, dairy, litre):
        with pytest.raises(DuplicateItemError):
            create_item(name='Milk', category_id=dairy.id, unit_id=litre.id)

    def test_update_item_category_and_unit(self, bread, dairy, litre):
        updated = update_item(item_id=bread.id, category_id=dairy.id, unit_id=litre.id)

        assert updated.category == dairy
        assert updated.unit == litre
        assert updated.name == 'Bread'

    def test_delete_item(self, bread):
        delete_item(item_id=bread.id)
        assert not Item.objects.filter(id=bread.id).exists()

    def test_delete_missing_item(self):
        with pytest.raises(ItemNotFoundError):
            delete_item(item_id=uuid4())
