"""Serializers for the core app.

Contains serializers for authentication and the User model.
Field names are camelCase on the wire because the browser client consumes
them directly.
"""

from django.contrib.auth import get_user_model
from rest_framework import serializers

from clinic_backend.core.models import Role

User = get_user_model()


class ForcedUpdateMixin:
    """ModelSerializer mixin: updates must hit an existing row.

    ``save(force_update=True)`` raises ``DatabaseError`` when the row was
    deleted concurrently; ``core.utils.save_existing`` turns that into 404.
    """

    def update(self, instance, validated_data):
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save(force_update=True)
        return instance


# -----------------------------------------------------------------------------
# User Serializers
# -----------------------------------------------------------------------------


class UserSerializer(serializers.ModelSerializer):
    """Read-only user DTO."""

    class Meta:
        model = User
        fields = ['id', 'username', 'role']
        read_only_fields = fields


class UserCreateSerializer(serializers.ModelSerializer):
    """Admin-side user creation."""

    password = serializers.CharField(write_only=True, required=True, min_length=6)
    role = serializers.ChoiceField(choices=Role.choices)

    class Meta:
        model = User
        fields = ['username', 'password', 'role']

    def create(self, validated_data):
        password = validated_data.pop('password')
        return User.objects.create_user(password=password, **validated_data)


class UserUpdateSerializer(ForcedUpdateMixin, serializers.ModelSerializer):
    """Only the role can change; usernames are immutable."""

    role = serializers.ChoiceField(choices=Role.choices)

    class Meta:
        model = User
        fields = ['role']


class UserMeSerializer(serializers.ModelSerializer):
    """Serializer for the /auth/me endpoint.

    Returns the current user plus the id of the linked doctor profile, if any.
    """

    doctorId = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'username', 'role', 'doctorId']
        read_only_fields = fields

    def get_doctorId(self, obj):
        profile = getattr(obj, 'doctor_profile', None)
        return getattr(profile, 'id', None)


# -----------------------------------------------------------------------------
# Authentication Serializers
# -----------------------------------------------------------------------------


class LoginSerializer(serializers.Serializer):
    """Credentials for POST /api/auth/login."""

    username = serializers.CharField(required=True)
    password = serializers.CharField(required=True, write_only=True, trim_whitespace=False)


class RegisterSerializer(serializers.Serializer):
    """Self-registration payload.

    Presence of username/password and uniqueness are checked in the view so
    the error bodies match what the browser client displays.
    """

    username = serializers.CharField(required=False, allow_blank=True, max_length=150)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True, trim_whitespace=False)
    role = serializers.CharField(required=False, allow_blank=True)

    # Optional doctor profile fields
    name = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
    pwzNumber = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
    specialty = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    phoneNumber = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=50)


class RefreshSerializer(serializers.Serializer):
    """Validates a refresh token."""

    refresh = serializers.CharField(required=True)

    def validate_refresh(self, value):
        from rest_framework_simplejwt.exceptions import TokenError
        from rest_framework_simplejwt.tokens import RefreshToken

        try:
            RefreshToken(value)
        except TokenError as e:
            raise serializers.ValidationError(f'Invalid or expired refresh token: {str(e)}')
        return value
