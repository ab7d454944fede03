from django.core.files.storage import default_storage
from rest_framework import serializers
from .models import DiscountCard, CardIdentifier


class CardIdentifierSerializer(serializers.ModelSerializer):
    card_id = serializers.UUIDField(read_only=True)
    image_url = serializers.SerializerMethodField()

    class Meta:
        model = CardIdentifier
        fields = ['id', 'card_id', 'type', 'value', 'image_url', 'created_at']
        read_only_fields = fields

    def get_image_url(self, obj):
        if not obj.image_path:
            return None
        return default_storage.url(obj.image_path)


class DiscountCardSerializer(serializers.ModelSerializer):
    """Card with its identifiers."""

    identifiers = CardIdentifierSerializer(many=True, read_only=True)

    class Meta:
        model = DiscountCard
        fields = [
            'id',
            'name',
            'comment',
            'is_active',
            'identifiers',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class DiscountCardInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200, allow_blank=True)
    comment = serializers.CharField(required=False, allow_blank=True)


class CardIdentifierInputSerializer(serializers.Serializer):
    """Multipart payload for adding or replacing an identifier."""

    type = serializers.ChoiceField(choices=CardIdentifier.Type.choices)
    value = serializers.CharField(max_length=255, required=False, allow_blank=True)
    image = serializers.FileField(required=False, allow_null=True)
    keep_image = serializers.BooleanField(default=True)


class ResolveCardSerializer(serializers.Serializer):
    value = serializers.CharField(max_length=255)
