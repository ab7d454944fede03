# ==========================================
# apps/lists/admin.py
# ==========================================

from django.contrib import admin
from .models import ShoppingList, ListShare, ListItem


class ListItemInline(admin.TabularInline):
    model = ListItem
    extra = 0
    fields = ['item', 'quantity', 'is_checked', 'comment']
    autocomplete_fields = ['item']


class ListShareInline(admin.TabularInline):
    model = ListShare
    extra = 0
    fields = ['user', 'created_at']
    readonly_fields = ['created_at']


@admin.register(ShoppingList)
class ShoppingListAdmin(admin.ModelAdmin):
    list_display = ['name', 'owner', 'is_shared', 'share_count', 'created_at']
    list_filter = ['is_shared', 'created_at']
    search_fields = ['name', 'owner__name']
    list_select_related = ['owner']
    inlines = [ListShareInline, ListItemInline]
    actions = ['make_shared', 'make_private']

    def share_count(self, obj):
        return obj.shares.count()
    share_count.short_description = 'Specific shares'

    @admin.action(description='Share selected lists with everyone')
    def make_shared(self, request, queryset):
        count = queryset.update(is_shared=True)
        self.message_user(request, f'Shared {count} list(s).')

    @admin.action(description='Make selected lists private (specific shares kept)')
    def make_private(self, request, queryset):
        count = queryset.update(is_shared=False)
        self.message_user(request, f'Made {count} list(s) private.')


@admin.register(ListShare)
class ListShareAdmin(admin.ModelAdmin):
    list_display = ['list', 'user', 'created_at']
    search_fields = ['list__name', 'user__name']
    list_select_related = ['list', 'user']
