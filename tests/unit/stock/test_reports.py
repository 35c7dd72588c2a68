"""Unit tests for the report arithmetic (pure functions)."""

from __future__ import annotations

import datetime

import pytest

from modules.stock.dtos import DailyReportTotals, StockTotals
from modules.stock.reports import build_daily_report, build_stock_summary

pytestmark = pytest.mark.unit


class TestStockSummary:
    def test_derived_fields(self):
        summary = build_stock_summary(
            StockTotals(inbound_full=100, delivered_full=40, recovered_empty=10)
        )

        assert summary.llenas_disponibles_estimadas == 60
        assert summary.pendientes_recuperar == 30
        assert summary.vacias_deposito_estimadas == 10
        assert summary.llenas_ingresadas == 100
        assert summary.llenas_entregadas == 40
        assert summary.vacias_recibidas == 10
        assert summary.date is None

    def test_echoes_cutoff_date(self):
        cutoff = datetime.date(2026, 2, 16)
        assert build_stock_summary(StockTotals(), cutoff).date == cutoff

    def test_empty_ledger_is_all_zero(self):
        summary = build_stock_summary(StockTotals())
        assert summary.llenas_disponibles_estimadas == 0
        assert summary.pendientes_recuperar == 0

    def test_negative_values_are_not_clamped(self):
        summary = build_stock_summary(
            StockTotals(inbound_full=5, delivered_full=8, recovered_empty=10)
        )
        assert summary.llenas_disponibles_estimadas == -3
        assert summary.pendientes_recuperar == -2


class TestDailyReport:
    def test_pending_is_delivered_minus_recovered(self):
        date = datetime.date(2026, 2, 16)
        report = build_daily_report(
            DailyReportTotals(deliveries_count=3, delivered_full=7, recovered_empty=4),
            date,
        )

        assert report.date == date
        assert report.entregas_dia == 3
        assert report.llenas_entregadas == 7
        assert report.vacias_recibidas == 4
        assert report.pendiente == 3

    def test_more_empties_than_fulls_gives_negative_pending(self):
        report = build_daily_report(
            DailyReportTotals(deliveries_count=1, delivered_full=1, recovered_empty=3),
            datetime.date(2026, 2, 16),
        )
        assert report.pendiente == -2
