"""Django ORM implementation of the Order repository.

Write methods do not open their own transaction: the service owns the
unit of work and wraps every call in ``transaction.atomic``.  Database
failures are translated into domain error kinds.
"""

from __future__ import annotations

import datetime
from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db.models import QuerySet

from modules.core.repositories.errors import translate_db_errors
from modules.dispatch.models import Assignment
from modules.orders.constants import OrderStatus
from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, data: Dict[str, Any]) -> Order:
        with translate_db_errors("orders.create"):
            return Order.objects.create(
                address=data["address"],
                zone=data["zone"],
                scheduled_date=data["scheduled_date"],
                time_slot=data["time_slot"],
                quantity=data["quantity"],
                notes=data.get("notes") or "",
                status=OrderStatus.PENDING,
            )

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Order]:
        try:
            return Order.objects.select_related("assignee").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_for_update(self, id: str) -> Optional[Order]:
        try:
            return Order.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def lock_many(self, ids: Sequence[UUID]) -> List[Order]:
        with translate_db_errors("orders.lock_many"):
            return list(
                Order.objects.select_for_update().filter(id__in=ids).order_by("id")
            )

    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet[Order]:
        """Orders matching *filters*.

        Supported filter keys: ``scheduled_date``, ``status`` and
        ``assignee_id``.  ``None`` values are ignored.
        """
        queryset = Order.objects.select_related("assignee").order_by(
            "scheduled_date", "created_at", "id"
        )
        if filters:
            lookups = {key: value for key, value in filters.items() if value is not None}
            queryset = queryset.filter(**lookups)
        return queryset

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update_status(self, order: Order, status: str) -> Order:
        order.status = status
        with translate_db_errors("orders.update_status"):
            order.save(update_fields=["status"])
        logger.info("order.status_persisted", order_id=str(order.id), status=status)
        return order

    def reprogram(
        self,
        order: Order,
        scheduled_date: datetime.date,
        time_slot: str,
    ) -> Order:
        order.scheduled_date = scheduled_date
        order.time_slot = time_slot
        order.status = OrderStatus.ASSIGNED
        with translate_db_errors("orders.reprogram"):
            order.save(update_fields=["scheduled_date", "time_slot", "status"])
        return order

    def assign(self, orders: Sequence[Order], driver_id: UUID) -> List[Order]:
        with translate_db_errors("orders.assign"):
            for order in orders:
                order.status = OrderStatus.ASSIGNED
                order.assignee_id = driver_id
                order.save(update_fields=["status", "assignee"])
            Assignment.objects.bulk_create(
                [Assignment(order=order, driver_id=driver_id) for order in orders]
            )
        return list(orders)
