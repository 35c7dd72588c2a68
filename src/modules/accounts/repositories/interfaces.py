"""User repository interface (read-only, used for driver look-ups)."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional
from uuid import UUID

from modules.core.repositories.interfaces import IRepository, Queryable

if TYPE_CHECKING:
    from modules.accounts.models import User


class IUserRepository(IRepository["User"]):
    @abstractmethod
    def get_by_id(self, id: str) -> Optional[User]:
        """Retrieve a user by primary key (``None`` if absent or invalid)."""

    @abstractmethod
    def get_active_by_id(self, id: UUID) -> Optional[User]:
        """Retrieve an active user, ``None`` if absent or deactivated."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> Queryable[User]:
        """List users with optional filters."""
