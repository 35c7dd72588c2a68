"""Stock ledger repository interface."""

from __future__ import annotations

import datetime
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from modules.stock.dtos import DailyReportTotals, StockTotals
    from modules.stock.models import StockInbound


class IStockRepository(ABC):
    @abstractmethod
    def register_inbound(self, data: Dict[str, Any]) -> StockInbound:
        """Append a ledger entry (``inbound_date``, ``cantidad_llenas``, ``notes``)."""

    @abstractmethod
    def totals(self, cutoff: Optional[datetime.date] = None) -> StockTotals:
        """Inbound, delivered and recovered sums up to *cutoff* (inclusive).

        Without a cutoff the whole history is summed.
        """

    @abstractmethod
    def daily_totals(self, date: datetime.date) -> DailyReportTotals:
        """Delivery count and sums for deliveries created on *date*."""
