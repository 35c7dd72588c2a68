"""Stock ledger and report API views (administrators only)."""

from __future__ import annotations

from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from modules.accounts.permissions import AuthContext, IsAdministrator
from modules.audit.repositories import AuditDjangoRepository
from modules.stock.dtos import RegisterInboundDTO
from modules.stock.repositories import StockDjangoRepository
from modules.stock.serializers import (
    DailyReportSerializer,
    RegisterInboundSerializer,
    ReportQuerySerializer,
    StockInboundSerializer,
    StockSummarySerializer,
)
from modules.stock.services import ReportService, StockService


class StockInboundView(GenericAPIView):
    """POST /api/v1/stock/inbounds/"""

    permission_classes = [IsAuthenticated, IsAdministrator]
    serializer_class = RegisterInboundSerializer

    def post(self, request: Request) -> Response:
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = StockService(
            stock_repository=StockDjangoRepository(),
            audit_repository=AuditDjangoRepository(),
        )
        inbound = service.register_inbound(
            RegisterInboundDTO(**serializer.validated_data),
            actor=AuthContext.from_user(request.user),
        )
        return Response(
            StockInboundSerializer(inbound).data, status=status.HTTP_201_CREATED
        )


class _ReportView(GenericAPIView):
    permission_classes = [IsAuthenticated, IsAdministrator]

    def _report_date(self, request: Request):
        query = ReportQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        return query.validated_data.get("date")


class StockSummaryView(_ReportView):
    """GET /api/v1/stock/summary/?date=YYYY-MM-DD"""

    serializer_class = StockSummarySerializer

    def get(self, request: Request) -> Response:
        summary = ReportService(StockDjangoRepository()).stock_summary(
            self._report_date(request)
        )
        return Response(StockSummarySerializer(summary.model_dump()).data)


class DailyReportView(_ReportView):
    """GET /api/v1/reports/daily/?date=YYYY-MM-DD"""

    serializer_class = DailyReportSerializer

    def get(self, request: Request) -> Response:
        report = ReportService(StockDjangoRepository()).daily_report(
            self._report_date(request)
        )
        return Response(DailyReportSerializer(report.model_dump()).data)
