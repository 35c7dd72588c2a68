"""Account API views."""

from __future__ import annotations

from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.accounts.serializers import MeSerializer


class MeView(APIView):
    """GET /api/v1/me/: identity of the authenticated caller.

    Fail closed: no token or a bad token yields 401.
    """

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        return Response(MeSerializer(request.user).data)
