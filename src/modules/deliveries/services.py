"""Delivery reconciliation service.

Records what happened at the customer's door:

- ``register_delivery``: the cylinders were handed over; the order
  becomes DELIVERED.
- ``register_failed_delivery``: nobody could receive them; the attempt
  is recorded and the order goes back to ASSIGNED (same driver),
  optionally on a new date or time slot.

Checks run in a fixed order (input, existence, ownership, status) and
all of them finish before the first write.  The outcome row and the
order update share one ``transaction.atomic`` block, with the order row
locked so a second concurrent delivery sees DELIVERED and is rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

import structlog
from django.db import transaction

from modules.accounts.permissions import can_access
from modules.audit.constants import AuditAction, AuditEntity
from modules.deliveries.exceptions import (
    DeliveryAccessDenied,
    InvalidDeliveryQuantities,
    MissingFailureReason,
    OrderNotDeliverable,
)
from modules.orders.constants import DELIVERABLE_STATES, OrderStatus, can_transition
from modules.orders.exceptions import InvalidOrderStatus, OrderNotFound

if TYPE_CHECKING:
    from modules.accounts.permissions import AuthContext
    from modules.audit.repositories.interfaces import IAuditRepository
    from modules.deliveries.dtos import (
        RegisterDeliveryDTO,
        RegisterFailedDeliveryDTO,
    )
    from modules.deliveries.models import Delivery, FailedDelivery
    from modules.deliveries.repositories.interfaces import IDeliveryRepository
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class DeliveryService:
    def __init__(
        self,
        order_repository: IOrderRepository,
        delivery_repository: IDeliveryRepository,
        audit_repository: IAuditRepository,
    ) -> None:
        self._order_repo = order_repository
        self._delivery_repo = delivery_repository
        self._audit_repo = audit_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def register_delivery(
        self,
        dto: RegisterDeliveryDTO,
        actor: Optional[AuthContext] = None,
    ) -> Delivery:
        """Record a successful delivery and close the order.

        Raises:
            InvalidDeliveryQuantities: a quantity is negative.
            OrderNotFound: the order does not exist.
            DeliveryAccessDenied: *actor* is a driver and not the assignee.
            OrderNotDeliverable: the order is not ASSIGNED or IN_TRANSIT.
        """
        if dto.llenas_entregadas < 0 or dto.vacias_recibidas < 0:
            raise InvalidDeliveryQuantities(
                "llenas_entregadas and vacias_recibidas must be >= 0."
            )

        log = logger.bind(order_id=str(dto.order_id))

        with transaction.atomic():
            order = self._load_deliverable_order(dto.order_id, actor)
            if not can_transition(order.status, OrderStatus.DELIVERED):
                raise InvalidOrderStatus(
                    f"Cannot transition order from {order.status} "
                    f"to {OrderStatus.DELIVERED}."
                )

            delivery = self._delivery_repo.create_delivery(
                {
                    "order_id": order.id,
                    "llenas_entregadas": dto.llenas_entregadas,
                    "vacias_recibidas": dto.vacias_recibidas,
                    "notes": dto.notes or "",
                }
            )
            self._order_repo.update_status(order, OrderStatus.DELIVERED)

        log.info(
            "delivery.registered",
            delivery_id=str(delivery.id),
            llenas_entregadas=delivery.llenas_entregadas,
            vacias_recibidas=delivery.vacias_recibidas,
        )
        self._audit_repo.record_event(
            actor_id=actor.user_id if actor else None,
            entity=AuditEntity.DELIVERY,
            entity_id=delivery.id,
            action=AuditAction.CREATED,
            details={
                "order_id": str(order.id),
                "llenas_entregadas": delivery.llenas_entregadas,
                "vacias_recibidas": delivery.vacias_recibidas,
            },
        )
        return delivery

    def register_failed_delivery(
        self,
        dto: RegisterFailedDeliveryDTO,
        actor: Optional[AuthContext] = None,
    ) -> FailedDelivery:
        """Record a failed attempt and reschedule the order.

        Missing reprogram fields keep the order's current date and slot.
        The order returns to ASSIGNED directly, without going through
        the general transition table.

        Raises:
            MissingFailureReason: the reason is blank.
            OrderNotFound: the order does not exist.
            DeliveryAccessDenied: *actor* is a driver and not the assignee.
            OrderNotDeliverable: the order is not ASSIGNED or IN_TRANSIT.
        """
        reason = dto.reason.strip()
        if not reason:
            raise MissingFailureReason("reason must not be blank.")

        log = logger.bind(order_id=str(dto.order_id))

        with transaction.atomic():
            order = self._load_deliverable_order(dto.order_id, actor)

            failure = self._delivery_repo.create_failed_delivery(
                {
                    "order_id": order.id,
                    "reason": reason,
                    "reprogram_date": dto.reprogram_date,
                    "reprogram_time_slot": dto.reprogram_time_slot,
                }
            )
            order = self._order_repo.reprogram(
                order,
                scheduled_date=dto.reprogram_date or order.scheduled_date,
                time_slot=dto.reprogram_time_slot or order.time_slot,
            )

        log.info(
            "delivery.failed_registered",
            failure_id=str(failure.id),
            scheduled_date=str(order.scheduled_date),
            time_slot=order.time_slot,
        )
        self._audit_repo.record_event(
            actor_id=actor.user_id if actor else None,
            entity=AuditEntity.DELIVERY_FAILURE,
            entity_id=failure.id,
            action=AuditAction.CREATED,
            details={
                "order_id": str(order.id),
                "reason": reason,
                "reprogram_date": dto.reprogram_date,
                "reprogram_time_slot": dto.reprogram_time_slot,
            },
        )
        return failure

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _load_deliverable_order(
        self, order_id: UUID, actor: Optional[AuthContext]
    ) -> Order:
        order = self._order_repo.get_for_update(str(order_id))
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")

        if actor and not can_access(actor.role, actor.user_id, order.assignee_id):
            logger.warning(
                "delivery.access_denied",
                order_id=str(order_id),
                user_id=str(actor.user_id),
            )
            raise DeliveryAccessDenied("Order is assigned to another driver.")

        if order.status not in DELIVERABLE_STATES:
            raise OrderNotDeliverable(
                "order must be ASSIGNED or IN_TRANSIT to register a delivery."
            )
        return order
