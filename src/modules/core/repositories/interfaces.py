"""Repository contracts shared by every module.

Services are constructed with objects implementing these ABCs and never
import a model manager directly, so unit tests can hand them a
``MagicMock`` instead of a database.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, Protocol, TypeVar

from django.db import models

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Queryable(Protocol[T_co]):
    """Anything a list endpoint can paginate and narrow further."""

    def filter(self, **kwargs: Any) -> models.QuerySet: ...


class IRepository(ABC, Generic[T]):
    """Read side common to every store.

    ``T`` is the entity the store manages (``Order``, ``User``).  Nothing
    in GasFlow is ever deleted, and writes are named after the business
    operation that performs them, so the shared contract is read-only.
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Return the entity, or ``None`` when the id is unknown or malformed."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> Queryable[T]:
        """Return entities matching ``filters``; ``None`` values are ignored."""
