from rest_framework import serializers
from .models import Category, Unit, Item


class CategorySerializer(serializers.ModelSerializer):
    """Category output, with item count when annotated."""

    item_count = serializers.IntegerField(read_only=True, required=False)
    is_default = serializers.BooleanField(read_only=True)

    class Meta:
        model = Category
        fields = ['id', 'name', 'comment', 'item_count', 'is_default']
        read_only_fields = fields


class CategoryInputSerializer(serializers.Serializer):
    """Create/update payload. Uniqueness is checked by the service."""

    name = serializers.CharField(max_length=100)
    comment = serializers.CharField(required=False, allow_blank=True)


class UnitSerializer(serializers.ModelSerializer):

    class Meta:
        model = Unit
        fields = ['id', 'name']
        read_only_fields = fields


class UnitInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=50)


class ItemSerializer(serializers.ModelSerializer):
    """Item with its category and unit names flattened."""

    category_id = serializers.UUIDField(read_only=True)
    unit_id = serializers.UUIDField(read_only=True)
    category_name = serializers.CharField(source='category.name', read_only=True)
    unit_name = serializers.CharField(source='unit.name', read_only=True)

    class Meta:
        model = Item
        fields = ['id', 'name', 'category_id', 'unit_id', 'category_name', 'unit_name']
        read_only_fields = fields


class ItemInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    category_id = serializers.UUIDField()
    unit_id = serializers.UUIDField()
