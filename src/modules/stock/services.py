"""Stock ledger and reporting services.

``StockService`` appends inbound batches to the ledger.
``ReportService`` reads committed aggregates and derives the stock
summary and the daily operational report; it never writes.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Optional

import structlog
from django.db import transaction
from django.utils import timezone

from modules.audit.constants import AuditAction, AuditEntity
from modules.stock.exceptions import InvalidInboundQuantity
from modules.stock.reports import build_daily_report, build_stock_summary

if TYPE_CHECKING:
    from modules.accounts.permissions import AuthContext
    from modules.audit.repositories.interfaces import IAuditRepository
    from modules.stock.dtos import DailyReportDTO, RegisterInboundDTO, StockSummaryDTO
    from modules.stock.models import StockInbound
    from modules.stock.repositories.interfaces import IStockRepository

logger = structlog.get_logger(__name__)


class StockService:
    def __init__(
        self,
        stock_repository: IStockRepository,
        audit_repository: IAuditRepository,
    ) -> None:
        self._stock_repo = stock_repository
        self._audit_repo = audit_repository

    def register_inbound(
        self,
        dto: RegisterInboundDTO,
        actor: Optional[AuthContext] = None,
    ) -> StockInbound:
        """Append an inbound batch of full cylinders to the ledger.

        Raises:
            InvalidInboundQuantity: ``cantidad_llenas`` is zero or negative.
        """
        if dto.cantidad_llenas <= 0:
            raise InvalidInboundQuantity("cantidad_llenas must be greater than 0.")

        with transaction.atomic():
            inbound = self._stock_repo.register_inbound(
                {
                    "inbound_date": dto.inbound_date,
                    "cantidad_llenas": dto.cantidad_llenas,
                    "notes": dto.notes or "",
                }
            )

        logger.info(
            "stock.inbound_registered",
            inbound_id=str(inbound.id),
            inbound_date=str(inbound.inbound_date),
            cantidad_llenas=inbound.cantidad_llenas,
        )
        self._audit_repo.record_event(
            actor_id=actor.user_id if actor else None,
            entity=AuditEntity.STOCK_INBOUND,
            entity_id=inbound.id,
            action=AuditAction.CREATED,
            details={
                "date": inbound.inbound_date,
                "cantidad_llenas": inbound.cantidad_llenas,
            },
        )
        return inbound


class ReportService:
    def __init__(self, stock_repository: IStockRepository) -> None:
        self._stock_repo = stock_repository

    def stock_summary(self, date: Optional[datetime.date] = None) -> StockSummaryDTO:
        """Estimated depot stock as of *date* (whole history when ``None``)."""
        return build_stock_summary(self._stock_repo.totals(date), date)

    def daily_report(self, date: Optional[datetime.date] = None) -> DailyReportDTO:
        """Deliveries of one local calendar day (today by default)."""
        report_date = date or timezone.localdate()
        return build_daily_report(self._stock_repo.daily_totals(report_date), report_date)
