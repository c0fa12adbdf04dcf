from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers
from .models import User


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (nested in teams, expenses, snacks, etc.)."""

    class Meta:
        model = User
        fields = ['id', 'full_name', 'email', 'phone']
        read_only_fields = fields


class UserSerializer(serializers.ModelSerializer):
    """Full profile of a user, never including the password."""

    current_team = serializers.UUIDField(source='current_team_id', read_only=True, allow_null=True)

    class Meta:
        model = User
        fields = [
            'id',
            'full_name',
            'email',
            'phone',
            'date_of_birth',
            'is_active',
            'current_team',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields


class SignupSerializer(serializers.Serializer):
    """Serializer for user registration."""

    full_name = serializers.CharField(max_length=150)
    email = serializers.CharField(max_length=255)
    phone = serializers.CharField(max_length=30)
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    date_of_birth = serializers.DateField()


class SigninSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.CharField()
    password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )


class PasswordResetRequestSerializer(serializers.Serializer):
    """Serializer for password reset request."""

    email = serializers.CharField()


class PasswordResetConfirmSerializer(serializers.Serializer):
    """Serializer for password reset confirmation."""

    email = serializers.CharField()
    token = serializers.CharField()
    new_password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )


class UserUpdateSerializer(serializers.Serializer):
    """Fields a profile update may carry; all optional."""

    full_name = serializers.CharField(max_length=150, required=False)
    email = serializers.CharField(max_length=255, required=False)
    phone = serializers.CharField(max_length=30, required=False)
    is_active = serializers.BooleanField(required=False)
