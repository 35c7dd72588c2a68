"""Account serializers: JWT pair with role claim, and the ``/me`` payload."""

from __future__ import annotations

from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from modules.accounts.models import User


class RoleTokenObtainPairSerializer(TokenObtainPairSerializer):
    """Adds the caller's ``role`` to the token claims and to the response."""

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["role"] = user.role
        return token

    def validate(self, attrs):
        data = super().validate(attrs)
        data["role"] = self.user.role
        return data


class MeSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "username", "role"]
        read_only_fields = fields
