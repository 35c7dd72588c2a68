"""Django ORM implementation of the stock ledger repository.

Deliveries are bucketed by the local calendar date of ``created_at``
(``TIME_ZONE`` setting); inbound batches by their ``inbound_date``.
"""

from __future__ import annotations

import datetime
from typing import Any, Dict, Optional

from django.db.models import Count, Sum

from modules.core.repositories.errors import translate_db_errors
from modules.deliveries.models import Delivery
from modules.stock.dtos import DailyReportTotals, StockTotals
from modules.stock.models import StockInbound
from modules.stock.repositories.interfaces import IStockRepository


class StockDjangoRepository(IStockRepository):
    def register_inbound(self, data: Dict[str, Any]) -> StockInbound:
        with translate_db_errors("stock.register_inbound"):
            return StockInbound.objects.create(
                inbound_date=data["inbound_date"],
                cantidad_llenas=data["cantidad_llenas"],
                notes=data.get("notes") or "",
            )

    def totals(self, cutoff: Optional[datetime.date] = None) -> StockTotals:
        inbounds = StockInbound.objects.all()
        deliveries = Delivery.objects.all()
        if cutoff is not None:
            inbounds = inbounds.filter(inbound_date__lte=cutoff)
            deliveries = deliveries.filter(created_at__date__lte=cutoff)

        with translate_db_errors("stock.totals"):
            inbound = inbounds.aggregate(
                inbound_full=Sum("cantidad_llenas", default=0)
            )
            delivered = deliveries.aggregate(
                delivered_full=Sum("llenas_entregadas", default=0),
                recovered_empty=Sum("vacias_recibidas", default=0),
            )
        return StockTotals(**inbound, **delivered)

    def daily_totals(self, date: datetime.date) -> DailyReportTotals:
        with translate_db_errors("stock.daily_totals"):
            totals = Delivery.objects.filter(created_at__date=date).aggregate(
                deliveries_count=Count("id"),
                delivered_full=Sum("llenas_entregadas", default=0),
                recovered_empty=Sum("vacias_recibidas", default=0),
            )
        return DailyReportTotals(**totals)
