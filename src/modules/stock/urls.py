"""Stock and report URL configuration."""

from django.urls import path

from modules.stock.views import DailyReportView, StockInboundView, StockSummaryView

urlpatterns = [
    path("stock/inbounds/", StockInboundView.as_view(), name="stock-inbound"),
    path("stock/summary/", StockSummaryView.as_view(), name="stock-summary"),
    path("reports/daily/", DailyReportView.as_view(), name="report-daily"),
]
