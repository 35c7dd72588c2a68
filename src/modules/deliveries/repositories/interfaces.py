"""Delivery repository interface.

Both writes are called from inside the service's ``transaction.atomic``
block, together with the matching order update.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from modules.deliveries.models import Delivery, FailedDelivery


class IDeliveryRepository(ABC):
    @abstractmethod
    def create_delivery(self, data: Dict[str, Any]) -> Delivery:
        """Persist a successful delivery.

        ``data`` keys: ``order_id``, ``llenas_entregadas``,
        ``vacias_recibidas`` and optionally ``notes``.
        """

    @abstractmethod
    def create_failed_delivery(self, data: Dict[str, Any]) -> FailedDelivery:
        """Persist a failed attempt.

        ``data`` keys: ``order_id``, ``reason``, ``reprogram_date`` and
        ``reprogram_time_slot`` (both may be ``None``).
        """
