"""Delivery serializers.

Quantity signs and blank reasons are checked by ``DeliveryService``;
these serializers only parse types.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.deliveries.models import Delivery, FailedDelivery


class RegisterDeliverySerializer(serializers.Serializer):
    order_id = serializers.UUIDField()
    llenas_entregadas = serializers.IntegerField()
    vacias_recibidas = serializers.IntegerField()
    notes = serializers.CharField(required=False, default="", allow_blank=True)


class RegisterFailedDeliverySerializer(serializers.Serializer):
    order_id = serializers.UUIDField()
    reason = serializers.CharField(allow_blank=True, trim_whitespace=False)
    reprogram_date = serializers.DateField(required=False, allow_null=True)
    reprogram_time_slot = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=50
    )


class DeliverySerializer(serializers.ModelSerializer):
    order_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Delivery
        fields = [
            "id",
            "order_id",
            "llenas_entregadas",
            "vacias_recibidas",
            "notes",
            "created_at",
        ]
        read_only_fields = fields


class FailedDeliverySerializer(serializers.ModelSerializer):
    order_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = FailedDelivery
        fields = [
            "id",
            "order_id",
            "reason",
            "reprogram_date",
            "reprogram_time_slot",
            "created_at",
        ]
        read_only_fields = fields
