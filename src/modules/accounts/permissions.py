"""Role and ownership policy.

All access rules live in one capability function, ``can_access``, so the
policy can be audited and unit-tested without touching the order state
machine.  DRF permission classes and services both call into it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
from uuid import UUID

from rest_framework.permissions import BasePermission

from modules.accounts.constants import Role


@dataclass(frozen=True)
class AuthContext:
    """Already-verified identity of the caller of a core operation."""

    user_id: UUID
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @classmethod
    def from_user(cls, user: Any) -> AuthContext:
        return cls(user_id=user.id, role=user.role)


def can_access(
    role: str,
    requester_id: Optional[UUID],
    resource_owner_id: Optional[UUID],
) -> bool:
    """Return ``True`` if *requester_id* acting as *role* may touch the resource.

    - ADMIN may access any resource.
    - DRIVER may access only resources owned by (assigned to) themselves;
      an unowned resource is never accessible to a driver.
    - Unknown roles are denied.
    """
    if role == Role.ADMIN:
        return True
    if role == Role.DRIVER:
        return resource_owner_id is not None and requester_id == resource_owner_id
    return False


class IsAdministrator(BasePermission):
    """Allows access only to authenticated users with the ADMIN role."""

    message = "ADMIN role required."

    def has_permission(self, request, view) -> bool:
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and getattr(user, "role", None) == Role.ADMIN
        )
