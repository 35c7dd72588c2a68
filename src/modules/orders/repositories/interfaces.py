"""Order repository interface.

Extends ``IRepository[Order]`` with the writes the order lifecycle,
dispatch and delivery services need.  ``get_for_update`` and
``lock_many`` must be called inside ``transaction.atomic``; the rows
stay locked until the surrounding transaction ends.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

import datetime
from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence
from uuid import UUID

from modules.core.repositories.interfaces import IRepository, Queryable

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Persist a new PENDING order.

        ``data`` keys: ``address``, ``zone``, ``scheduled_date``,
        ``time_slot``, ``quantity`` and optionally ``notes``.
        """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order, or ``None`` for unknown or malformed ids."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional[Order]:
        """Retrieve an order holding a row lock (``SELECT ... FOR UPDATE``)."""

    @abstractmethod
    def lock_many(self, ids: Sequence[UUID]) -> List[Order]:
        """Lock and return the existing orders among *ids*, in id order."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> Queryable[Order]:
        """Orders ordered by scheduled date, then creation time."""

    @abstractmethod
    def update_status(self, order: Order, status: str) -> Order:
        """Persist a new status and a fresh ``updated_at``."""

    @abstractmethod
    def reprogram(
        self,
        order: Order,
        scheduled_date: datetime.date,
        time_slot: str,
    ) -> Order:
        """Reschedule an order and move it back to ASSIGNED."""

    @abstractmethod
    def assign(self, orders: Sequence[Order], driver_id: UUID) -> List[Order]:
        """Set ASSIGNED and the assignee, appending one Assignment per order."""
