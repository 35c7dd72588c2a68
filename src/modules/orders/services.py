"""Order service layer (Use Cases).

Owns the order lifecycle: intake, lookup, listing and status changes.
Each write runs in its own ``transaction.atomic`` block; the audit event
is recorded after the block commits, so an audit failure reaches the
caller while the business change stays committed.

Business rules enforced:
- Quantity is positive; address, zone and time slot are not blank.
- Status changes follow ``VALID_TRANSITIONS`` and nothing else.
- Drivers only see orders assigned to themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

import structlog
from django.db import transaction

from modules.accounts.permissions import AuthContext, can_access
from modules.audit.constants import AuditAction, AuditEntity
from modules.orders.constants import can_transition
from modules.orders.dtos import OrderListFilterDTO
from modules.orders.exceptions import (
    InvalidOrderData,
    InvalidOrderStatus,
    OrderAccessDenied,
    OrderNotFound,
)

if TYPE_CHECKING:
    from modules.audit.repositories.interfaces import IAuditRepository
    from modules.core.repositories.interfaces import Queryable
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


def _actor_id(actor: Optional[AuthContext]) -> Optional[UUID]:
    return actor.user_id if actor else None


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        audit_repository: IAuditRepository,
    ) -> None:
        self._order_repo = order_repository
        self._audit_repo = audit_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create a new order in PENDING with no assignee.

        Raises:
            InvalidOrderData: non-positive quantity or a blank
                address / zone / time slot.
        """
        if dto.quantity <= 0:
            raise InvalidOrderData("quantity must be greater than 0.")
        for field in ("address", "zone", "time_slot"):
            if not getattr(dto, field).strip():
                raise InvalidOrderData(f"{field} must not be blank.")

        with transaction.atomic():
            order = self._order_repo.create(
                {
                    "address": dto.address.strip(),
                    "zone": dto.zone.strip(),
                    "scheduled_date": dto.scheduled_date,
                    "time_slot": dto.time_slot.strip(),
                    "quantity": dto.quantity,
                    "notes": dto.notes or "",
                }
            )

        logger.info(
            "order.created",
            order_id=str(order.id),
            zone=order.zone,
            scheduled_date=str(order.scheduled_date),
        )
        return order

    def change_status(
        self,
        order_id: UUID,
        target: str,
        actor: Optional[AuthContext] = None,
    ) -> Order:
        """Move an order to *target* if the lifecycle table allows it.

        The order row is locked before the transition is validated, so
        concurrent changes on the same order serialize.

        Raises:
            OrderNotFound: the order does not exist.
            InvalidOrderStatus: ``current -> target`` is not a legal pair.
        """
        log = logger.bind(order_id=str(order_id), target=target)

        with transaction.atomic():
            order = self._order_repo.get_for_update(str(order_id))
            if not order:
                raise OrderNotFound(f"Order {order_id} not found.")

            if not can_transition(order.status, target):
                log.warning("order.invalid_transition", current=order.status)
                raise InvalidOrderStatus(
                    f"Cannot transition order from {order.status} to {target}."
                )

            previous = order.status
            order = self._order_repo.update_status(order, target)

        log.info("order.status_changed", previous=previous)
        self._audit_repo.record_event(
            actor_id=_actor_id(actor),
            entity=AuditEntity.ORDER,
            entity_id=order.id,
            action=AuditAction.STATUS_CHANGED,
            details={"status": target},
        )
        return order

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str, actor: Optional[AuthContext] = None) -> Order:
        """Retrieve a single order.

        Raises:
            OrderNotFound: the order does not exist.
            OrderAccessDenied: *actor* is a driver and not the assignee.
        """
        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")
        if actor and not can_access(actor.role, actor.user_id, order.assignee_id):
            raise OrderAccessDenied("Order is assigned to another driver.")
        return order

    def list_orders(
        self,
        filters: Optional[OrderListFilterDTO] = None,
        actor: Optional[AuthContext] = None,
    ) -> Queryable[Order]:
        """Orders ordered by scheduled date, then creation time.

        A driver's listing is always restricted to their own orders,
        whatever ``assignee_id`` they asked for.
        """
        filters = filters or OrderListFilterDTO()
        assignee_id = filters.assignee_id
        if actor and not actor.is_admin:
            assignee_id = actor.user_id
        return self._order_repo.list(
            {
                "scheduled_date": filters.scheduled_date,
                "status": filters.status,
                "assignee_id": assignee_id,
            }
        )
