"""Dispatch API views."""

from __future__ import annotations

from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from modules.accounts.permissions import AuthContext, IsAdministrator
from modules.accounts.repositories import UserDjangoRepository
from modules.audit.repositories import AuditDjangoRepository
from modules.dispatch.dtos import AssignOrdersDTO
from modules.dispatch.serializers import AssignOrdersSerializer
from modules.dispatch.services import DispatchService
from modules.orders.repositories import OrderDjangoRepository


class AssignOrdersView(GenericAPIView):
    """POST /api/v1/dispatch/assign/

    Assigns a batch of orders to one driver.  Responds 204 on success;
    on any failure no order is modified.
    """

    permission_classes = [IsAuthenticated, IsAdministrator]
    serializer_class = AssignOrdersSerializer

    def post(self, request: Request) -> Response:
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = DispatchService(
            order_repository=OrderDjangoRepository(),
            user_repository=UserDjangoRepository(),
            audit_repository=AuditDjangoRepository(),
        )
        service.assign_orders(
            AssignOrdersDTO(**serializer.validated_data),
            actor=AuthContext.from_user(request.user),
        )
        return Response(status=status.HTTP_204_NO_CONTENT)
