"""Delivery API views.

Any authenticated user may call these endpoints; whether the caller may
report on a given order is decided by ``DeliveryService``.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.request import Request
from rest_framework.response import Response

from modules.accounts.permissions import AuthContext
from modules.audit.repositories import AuditDjangoRepository
from modules.deliveries.dtos import RegisterDeliveryDTO, RegisterFailedDeliveryDTO
from modules.deliveries.repositories import DeliveryDjangoRepository
from modules.deliveries.serializers import (
    DeliverySerializer,
    FailedDeliverySerializer,
    RegisterDeliverySerializer,
    RegisterFailedDeliverySerializer,
)
from modules.deliveries.services import DeliveryService
from modules.orders.repositories import OrderDjangoRepository


def _delivery_service() -> DeliveryService:
    return DeliveryService(
        order_repository=OrderDjangoRepository(),
        delivery_repository=DeliveryDjangoRepository(),
        audit_repository=AuditDjangoRepository(),
    )


class RegisterDeliveryView(GenericAPIView):
    """POST /api/v1/deliveries/"""

    serializer_class = RegisterDeliverySerializer

    def post(self, request: Request) -> Response:
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        delivery = _delivery_service().register_delivery(
            RegisterDeliveryDTO(**serializer.validated_data),
            actor=AuthContext.from_user(request.user),
        )
        return Response(
            DeliverySerializer(delivery).data, status=status.HTTP_201_CREATED
        )


class RegisterFailedDeliveryView(GenericAPIView):
    """POST /api/v1/deliveries/failed/"""

    serializer_class = RegisterFailedDeliverySerializer

    def post(self, request: Request) -> Response:
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        if not data.get("reprogram_time_slot"):
            data["reprogram_time_slot"] = None
        failure = _delivery_service().register_failed_delivery(
            RegisterFailedDeliveryDTO(**data),
            actor=AuthContext.from_user(request.user),
        )
        return Response(
            FailedDeliverySerializer(failure).data, status=status.HTTP_201_CREATED
        )
