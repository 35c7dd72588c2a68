"""Dispatch service: bulk assignment of orders to one driver.

The batch is all-or-nothing.  Every order row is locked (in id order)
and every precondition is checked before the first write; the writes
themselves share one ``transaction.atomic`` block.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.audit.constants import AuditAction, AuditEntity
from modules.dispatch.exceptions import DriverNotFound, EmptyAssignment
from modules.orders.exceptions import OrderNotFound

if TYPE_CHECKING:
    from modules.accounts.permissions import AuthContext
    from modules.accounts.repositories.interfaces import IUserRepository
    from modules.audit.repositories.interfaces import IAuditRepository
    from modules.dispatch.dtos import AssignOrdersDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class DispatchService:
    def __init__(
        self,
        order_repository: IOrderRepository,
        user_repository: IUserRepository,
        audit_repository: IAuditRepository,
    ) -> None:
        self._order_repo = order_repository
        self._user_repo = user_repository
        self._audit_repo = audit_repository

    def assign_orders(
        self,
        dto: AssignOrdersDTO,
        actor: Optional[AuthContext] = None,
    ) -> List[Order]:
        """Assign every order in *dto* to its driver, or none of them.

        Every order becomes ASSIGNED whatever its current status, so a
        DELIVERED order is reopened for a new delivery.  Repeated ids are
        assigned once.

        Raises:
            EmptyAssignment: no order ids were given.
            DriverNotFound: the driver does not exist or is inactive.
            OrderNotFound: one of the ids does not exist (names it).
        """
        order_ids = list(dict.fromkeys(dto.order_ids))
        if not order_ids:
            raise EmptyAssignment("order_ids must not be empty.")

        log = logger.bind(driver_id=str(dto.driver_id), order_count=len(order_ids))

        with transaction.atomic():
            driver = self._user_repo.get_active_by_id(dto.driver_id)
            if not driver:
                raise DriverNotFound(f"Driver {dto.driver_id} not found.")

            orders = self._order_repo.lock_many(order_ids)
            found = {order.id for order in orders}
            for order_id in order_ids:
                if order_id not in found:
                    log.warning("dispatch.order_missing", order_id=str(order_id))
                    raise OrderNotFound(f"Order {order_id} not found.")

            orders = self._order_repo.assign(orders, driver.id)

        log.info("dispatch.assigned")
        for order in orders:
            self._audit_repo.record_event(
                actor_id=actor.user_id if actor else None,
                entity=AuditEntity.ORDER,
                entity_id=order.id,
                action=AuditAction.ASSIGNED,
                details={"driver_id": str(driver.id)},
            )
        return orders
