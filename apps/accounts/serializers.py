from rest_framework import serializers
from .models import User


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (for auth responses and review authors)."""

    class Meta:
        model = User
        fields = ['id', 'username', 'email']
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """Request body for registration."""

    username = serializers.CharField(required=True, max_length=150)
    email = serializers.CharField(required=True, max_length=255)
    password = serializers.CharField(
        required=True,
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )


class UserLoginSerializer(serializers.Serializer):
    """
    Request body for login.

    The ``email`` field accepts either the email or the username.
    """

    email = serializers.CharField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )


class AuthResponseSerializer(serializers.Serializer):
    token = serializers.CharField()
    user = UserPublicSerializer()
