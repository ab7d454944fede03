# ==========================================
# apps/cards/models.py
# ==========================================

from django.db import models
from django.db.models import Q
import uuid


class DiscountCard(models.Model):
    """Loyalty card belonging to a single user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='discount_cards')
    name = models.CharField(max_length=200)
    comment = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'discount_cards'
        indexes = [
            models.Index(fields=['owner', 'name'], name='cards_owner_name_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name

    def is_owner(self, user):
        return self.owner_id == user.id

    def toggle(self):
        self.is_active = not self.is_active
        self.save(update_fields=['is_active', 'updated_at'])
        return self.is_active


class CardIdentifier(models.Model):
    """
    Code that resolves to a card at the till.

    ``manual`` identifiers always carry a value. ``screenshot`` identifiers
    may hold only an image. Non-empty values are unique across all cards.
    """

    class Type(models.TextChoices):
        MANUAL = 'manual', 'Manual code'
        SCREENSHOT = 'screenshot', 'Screenshot'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    card = models.ForeignKey(DiscountCard, on_delete=models.CASCADE, related_name='identifiers')
    type = models.CharField(max_length=20, choices=Type.choices, default=Type.MANUAL)
    value = models.CharField(max_length=255, blank=True)
    image_path = models.CharField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'card_identifiers'
        constraints = [
            models.UniqueConstraint(
                fields=['value'],
                condition=~Q(value=''),
                name='unique_card_identifier_value',
            ),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.card.name}: {self.value or self.type}"
