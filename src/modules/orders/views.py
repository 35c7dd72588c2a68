"""Order API views.

Exposes ``OrderService`` via HTTP using a DRF ViewSet.  Domain
exceptions propagate to the project exception handler, which maps each
error kind to its status code.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.accounts.permissions import AuthContext, IsAdministrator
from modules.audit.repositories import AuditDjangoRepository
from modules.core.pagination import StandardResultsSetPagination
from modules.orders.dtos import CreateOrderDTO
from modules.orders.filters import OrderFilter
from modules.orders.models import Order
from modules.orders.repositories import OrderDjangoRepository
from modules.orders.serializers import (
    ChangeStatusSerializer,
    CreateOrderSerializer,
    OrderSerializer,
)
from modules.orders.services import OrderService


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Does **not** extend ``ModelViewSet``: all ORM access goes through the
    service/repository layer.  Creating orders and changing their status
    is reserved to administrators; drivers may read their own orders.
    """

    queryset = Order.objects.none()
    serializer_class = OrderSerializer
    pagination_class = StandardResultsSetPagination

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            audit_repository=AuditDjangoRepository(),
        )

    def get_permissions(self):
        if self.action in {"create", "change_status"}:
            return [IsAuthenticated(), IsAdministrator()]
        return [IsAuthenticated()]

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = self._service.create_order(CreateOrderDTO(**serializer.validated_data))
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/?date=&status=&assignee=&page=&page_size="""
        filterset = OrderFilter(data=request.query_params, queryset=self.queryset)
        if not filterset.is_valid():
            raise ValidationError(filterset.errors)

        queryset = self._service.list_orders(
            filterset.to_dto(), actor=AuthContext.from_user(request.user)
        )
        page = self.paginate_queryset(queryset)
        serializer = OrderSerializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        order = self._service.get_order(
            str(pk), actor=AuthContext.from_user(request.user)
        )
        return Response(OrderSerializer(order).data)

    @action(detail=True, methods=["patch"], url_path="status")
    def change_status(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/orders/{pk}/status/"""
        serializer = ChangeStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = self._service.change_status(
            order_id=str(pk),
            target=serializer.validated_data["status"],
            actor=AuthContext.from_user(request.user),
        )
        return Response(OrderSerializer(order).data)
