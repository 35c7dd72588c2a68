"""User model with a role.

``User`` replaces Django's default user (``AUTH_USER_MODEL``) so every
account carries a ``role``: administrators manage orders, dispatch and
stock; drivers (repartidores) only see and deliver the orders assigned
to them.  The primary key is a UUIDv7 like every other GasFlow entity,
so driver ids and order ids share the same opaque format.
"""

from __future__ import annotations

import uuid6
from django.contrib.auth.models import AbstractUser, UserManager
from django.db import models

from modules.accounts.constants import Role


class GasFlowUserManager(UserManager):
    """Superusers are always administrators."""

    def create_superuser(self, username, email=None, password=None, **extra_fields):
        extra_fields.setdefault("role", Role.ADMIN)
        return super().create_superuser(username, email, password, **extra_fields)


class User(AbstractUser):
    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.DRIVER,
    )

    objects = GasFlowUserManager()

    class Meta:
        db_table = "users"
        ordering = ["username"]

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"
