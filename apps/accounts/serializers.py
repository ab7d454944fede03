from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Profile of the current user."""

    has_password = serializers.BooleanField(read_only=True)
    has_external_identity = serializers.BooleanField(read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'name',
            'email',
            'has_password',
            'has_external_identity',
            'created_at',
        ]
        read_only_fields = fields


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (share picker, list owners)."""

    class Meta:
        model = User
        fields = ['id', 'name']
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    name = serializers.CharField(max_length=100)
    password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)


class UserLoginSerializer(serializers.Serializer):
    """Login by user name or email."""

    login = serializers.CharField(
        help_text="User name or email"
    )
    password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )


class UpdateNameSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100, allow_blank=True)


class UpdateEmailSerializer(serializers.Serializer):
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)


class ChangePasswordSerializer(serializers.Serializer):
    new_password = serializers.CharField(
        allow_blank=True,
        style={'input_type': 'password'}
    )
