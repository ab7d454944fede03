# ==========================================
# apps/catalog/admin.py
# ==========================================

from django.contrib import admin
from django.db.models import Count
from .models import Category, Unit, Item


class ItemInline(admin.TabularInline):
    model = Item
    extra = 0
    fields = ['name', 'unit']
    show_change_link = True


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'comment', 'item_count', 'created_at']
    search_fields = ['name', 'comment']
    ordering = ['name']
    inlines = [ItemInline]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_item_count=Count('items'))

    def item_count(self, obj):
        return obj._item_count
    item_count.short_description = 'Items'
    item_count.admin_order_field = '_item_count'


@admin.register(Unit)
class UnitAdmin(admin.ModelAdmin):
    list_display = ['name']
    search_fields = ['name']
    ordering = ['name']


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'unit', 'created_at']
    list_filter = ['category', 'unit']
    search_fields = ['name']
    ordering = ['name']
    list_select_related = ['category', 'unit']
