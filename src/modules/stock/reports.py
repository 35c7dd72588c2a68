"""Report arithmetic.

Pure functions over already-aggregated totals: no I/O, no writes.
"""

from __future__ import annotations

import datetime
from typing import Optional

from modules.stock.dtos import (
    DailyReportDTO,
    DailyReportTotals,
    StockSummaryDTO,
    StockTotals,
)


def build_stock_summary(
    totals: StockTotals, date: Optional[datetime.date] = None
) -> StockSummaryDTO:
    return StockSummaryDTO(
        date=date,
        llenas_ingresadas=totals.inbound_full,
        llenas_entregadas=totals.delivered_full,
        vacias_recibidas=totals.recovered_empty,
        llenas_disponibles_estimadas=totals.inbound_full - totals.delivered_full,
        vacias_deposito_estimadas=totals.recovered_empty,
        pendientes_recuperar=totals.delivered_full - totals.recovered_empty,
    )


def build_daily_report(
    totals: DailyReportTotals, date: datetime.date
) -> DailyReportDTO:
    return DailyReportDTO(
        date=date,
        entregas_dia=totals.deliveries_count,
        llenas_entregadas=totals.delivered_full,
        vacias_recibidas=totals.recovered_empty,
        pendiente=totals.delivered_full - totals.recovered_empty,
    )
