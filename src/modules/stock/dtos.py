"""Stock and report DTOs.

- ``RegisterInboundDTO``: input for a new ledger entry.
- ``StockTotals`` / ``DailyReportTotals``: raw sums read from the store.
- ``StockSummaryDTO`` / ``DailyReportDTO``: derived report output.

Report figures are signed ints and are never clamped: a negative value
means the recorded data is inconsistent and is shown as such.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class RegisterInboundDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    inbound_date: datetime.date
    cantidad_llenas: int
    notes: Optional[str] = ""


class StockTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    inbound_full: int = 0
    delivered_full: int = 0
    recovered_empty: int = 0


class DailyReportTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    deliveries_count: int = 0
    delivered_full: int = 0
    recovered_empty: int = 0


class StockSummaryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: Optional[datetime.date]
    llenas_ingresadas: int
    llenas_entregadas: int
    vacias_recibidas: int
    llenas_disponibles_estimadas: int
    vacias_deposito_estimadas: int
    pendientes_recuperar: int


class DailyReportDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: datetime.date
    entregas_dia: int
    llenas_entregadas: int
    vacias_recibidas: int
    pendiente: int
