# ==========================================
# apps/lists/models.py
# ==========================================

from django.core.validators import MinValueValidator
from django.db import models
import uuid


class ShoppingList(models.Model):
    """
    Shopping list owned by one user.

    Visible to its owner, to everyone when ``is_shared`` is set, and to
    users holding a ListShare otherwise.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, unique=True)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='shopping_lists')
    is_shared = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'shopping_lists'
        indexes = [
            models.Index(fields=['owner', 'created_at'], name='lists_owner_created_idx'),
            models.Index(fields=['is_shared'], name='lists_is_shared_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name

    def is_owner(self, user):
        return self.owner_id == user.id

    def has_share(self, user):
        return self.shares.filter(user=user).exists()

    def is_visible_to(self, user):
        return self.is_owner(user) or self.is_shared or self.has_share(user)


class ListShare(models.Model):
    """Specific read grant of a list to one non-owner user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    list = models.ForeignKey(ShoppingList, on_delete=models.CASCADE, related_name='shares')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='list_shares')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'list_shares'
        unique_together = [['list', 'user']]
        indexes = [
            models.Index(fields=['user'], name='list_shares_user_idx'),
        ]

    def __str__(self):
        return f"{self.list.name} -> {self.user.name}"


class ListItem(models.Model):
    """Catalog item placed on a shopping list."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    list = models.ForeignKey(ShoppingList, on_delete=models.CASCADE, related_name='items')
    item = models.ForeignKey('catalog.Item', on_delete=models.CASCADE, related_name='list_entries')
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    is_checked = models.BooleanField(default=False)
    comment = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'list_items'
        indexes = [
            models.Index(fields=['list', 'is_checked'], name='list_items_checked_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.item.name} x{self.quantity} ({self.list.name})"

    def toggle(self):
        self.is_checked = not self.is_checked
        self.save(update_fields=['is_checked'])
        return self.is_checked
