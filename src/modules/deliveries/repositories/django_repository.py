"""Django ORM implementation of the Delivery repository."""

from __future__ import annotations

from typing import Any, Dict

from modules.core.repositories.errors import translate_db_errors
from modules.deliveries.models import Delivery, FailedDelivery
from modules.deliveries.repositories.interfaces import IDeliveryRepository


class DeliveryDjangoRepository(IDeliveryRepository):
    def create_delivery(self, data: Dict[str, Any]) -> Delivery:
        with translate_db_errors("deliveries.create_delivery"):
            return Delivery.objects.create(
                order_id=data["order_id"],
                llenas_entregadas=data["llenas_entregadas"],
                vacias_recibidas=data["vacias_recibidas"],
                notes=data.get("notes") or "",
            )

    def create_failed_delivery(self, data: Dict[str, Any]) -> FailedDelivery:
        with translate_db_errors("deliveries.create_failed_delivery"):
            return FailedDelivery.objects.create(
                order_id=data["order_id"],
                reason=data["reason"],
                reprogram_date=data.get("reprogram_date"),
                reprogram_time_slot=data.get("reprogram_time_slot"),
            )
