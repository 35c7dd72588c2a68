"""Order DRF serializers for API input/output.

Input serializers only check formats (dates, UUIDs, enum members).
Business rules live in ``OrderService`` so they also apply to callers
that do not go through HTTP.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.constants import OrderStatus
from modules.orders.models import Order

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CreateOrderSerializer(serializers.Serializer):
    address = serializers.CharField(max_length=255, allow_blank=True)
    zone = serializers.CharField(max_length=100, allow_blank=True)
    scheduled_date = serializers.DateField()
    time_slot = serializers.CharField(max_length=50, allow_blank=True)
    quantity = serializers.IntegerField()
    notes = serializers.CharField(required=False, default="", allow_blank=True)


class ChangeStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OrderStatus.choices)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderSerializer(serializers.ModelSerializer):
    status_display = serializers.CharField(source="get_status_display", read_only=True)
    assignee_id = serializers.UUIDField(read_only=True, allow_null=True)
    assignee_username = serializers.CharField(
        source="assignee.username", read_only=True, default=None
    )

    class Meta:
        model = Order
        fields = [
            "id",
            "address",
            "zone",
            "scheduled_date",
            "time_slot",
            "quantity",
            "notes",
            "status",
            "status_display",
            "assignee_id",
            "assignee_username",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
