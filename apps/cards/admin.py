# ==========================================
# apps/cards/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import DiscountCard, CardIdentifier


class CardIdentifierInline(admin.TabularInline):
    model = CardIdentifier
    extra = 0
    fields = ['type', 'value', 'image_path', 'created_at']
    readonly_fields = ['created_at']


@admin.register(DiscountCard)
class DiscountCardAdmin(admin.ModelAdmin):
    list_display = ['name', 'owner', 'status_badge', 'identifier_count', 'created_at']
    list_filter = ['is_active', 'created_at']
    search_fields = ['name', 'owner__name', 'identifiers__value']
    list_select_related = ['owner']
    inlines = [CardIdentifierInline]

    def status_badge(self, obj):
        color = 'green' if obj.is_active else 'gray'
        label = 'Active' if obj.is_active else 'Inactive'
        return format_html('<span style="color: {};">{}</span>', color, label)
    status_badge.short_description = 'Status'

    def identifier_count(self, obj):
        return obj.identifiers.count()
    identifier_count.short_description = 'Identifiers'


@admin.register(CardIdentifier)
class CardIdentifierAdmin(admin.ModelAdmin):
    list_display = ['value', 'type', 'card', 'created_at']
    list_filter = ['type']
    search_fields = ['value', 'card__name']
    list_select_related = ['card']
