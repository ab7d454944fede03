# ==========================================
# apps/catalog/models.py
# ==========================================

from django.db import models
import uuid


# Fallback category for items whose category was deleted
DEFAULT_CATEGORY_NAME = 'Без категории'


class Category(models.Model):
    """Product category shared by all users."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    comment = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'categories'
        ordering = ['name']
        verbose_name_plural = 'categories'

    def __str__(self):
        return self.name

    @property
    def is_default(self):
        return self.name == DEFAULT_CATEGORY_NAME

    @classmethod
    def get_default(cls):
        category, _ = cls.objects.get_or_create(name=DEFAULT_CATEGORY_NAME)
        return category


class Unit(models.Model):
    """Unit of measure (pcs, kg, l...)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=50, unique=True)

    class Meta:
        db_table = 'units'
        ordering = ['name']

    def __str__(self):
        return self.name


class Item(models.Model):
    """Catalog item that can be put on shopping lists."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, unique=True)
    # Casefolded copy of name; SQLite only folds ASCII in icontains
    search_name = models.CharField(max_length=400, blank=True, default='', editable=False)
    category = models.ForeignKey(Category, on_delete=models.PROTECT, related_name='items')
    unit = models.ForeignKey(Unit, on_delete=models.PROTECT, related_name='items')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'items'
        ordering = ['name']
        indexes = [
            models.Index(fields=['category'], name='items_category_idx'),
        ]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        self.search_name = self.name.casefold()
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'name' in update_fields:
            kwargs['update_fields'] = {*update_fields, 'search_name'}
        super().save(*args, **kwargs)
