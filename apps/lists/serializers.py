from rest_framework import serializers
from .models import ShoppingList, ListItem
from apps.accounts.serializers import UserPublicSerializer


class ListItemSerializer(serializers.ModelSerializer):
    """List entry with its catalog item flattened."""

    item_id = serializers.UUIDField(read_only=True)
    item_name = serializers.CharField(source='item.name', read_only=True)
    category_id = serializers.UUIDField(source='item.category_id', read_only=True)
    category_name = serializers.CharField(source='item.category.name', read_only=True)
    unit_id = serializers.UUIDField(source='item.unit_id', read_only=True)
    unit_name = serializers.CharField(source='item.unit.name', read_only=True)

    class Meta:
        model = ListItem
        fields = [
            'id',
            'item_id',
            'item_name',
            'category_id',
            'category_name',
            'unit_id',
            'unit_name',
            'quantity',
            'is_checked',
            'comment',
            'created_at',
        ]
        read_only_fields = fields


class ShoppingListSerializer(serializers.ModelSerializer):
    """Main serializer for lists."""

    owner = UserPublicSerializer(read_only=True)
    is_owner = serializers.SerializerMethodField()
    item_count = serializers.SerializerMethodField()

    class Meta:
        model = ShoppingList
        fields = [
            'id',
            'name',
            'is_shared',
            'owner',
            'is_owner',
            'item_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_is_owner(self, obj):
        request = self.context.get('request')
        if request and request.user.is_authenticated:
            return obj.is_owner(request.user)
        return False

    def get_item_count(self, obj):
        # Annotated by visible_lists(); fall back to a query otherwise
        count = getattr(obj, 'item_count', None)
        if count is None:
            count = obj.items.count()
        return count


class ShoppingListDetailSerializer(ShoppingListSerializer):
    """List with its entries."""

    items = ListItemSerializer(many=True, read_only=True)

    class Meta(ShoppingListSerializer.Meta):
        fields = ShoppingListSerializer.Meta.fields + ['items']
        read_only_fields = fields


class ShoppingListCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    is_shared = serializers.BooleanField(default=True)


class ShoppingListUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200, required=False, allow_blank=True)
    is_shared = serializers.BooleanField(required=False)


class ListSharesSerializer(serializers.Serializer):
    user_ids = serializers.ListField(child=serializers.UUIDField())


class ListItemCreateSerializer(serializers.Serializer):
    item_id = serializers.UUIDField()
    quantity = serializers.IntegerField(default=1)
    comment = serializers.CharField(required=False, allow_blank=True)


class ListItemUpdateSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(required=False)
    comment = serializers.CharField(required=False, allow_blank=True)
