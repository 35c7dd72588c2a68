"""Django ORM implementation of the User repository."""

from __future__ import annotations

from typing import Any, Dict, Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db.models import QuerySet

from modules.accounts.models import User
from modules.accounts.repositories.interfaces import IUserRepository


class UserDjangoRepository(IUserRepository):
    def get_by_id(self, id: str) -> Optional[User]:
        try:
            return User.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_active_by_id(self, id: UUID) -> Optional[User]:
        try:
            return User.objects.filter(id=id, is_active=True).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet[User]:
        queryset = User.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset
