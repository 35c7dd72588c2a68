"""Integration tests for delivery reconciliation endpoints."""

from __future__ import annotations

import datetime
from uuid import uuid4

import pytest

from modules.audit.models import AuditEvent
from modules.deliveries.models import Delivery, FailedDelivery
from modules.orders.constants import OrderStatus

pytestmark = pytest.mark.integration

DELIVERIES_URL = "/api/v1/deliveries/"
FAILED_URL = "/api/v1/deliveries/failed/"


class TestRegisterDelivery:
    def test_driver_delivers_own_order(self, driver_client, driver_user, make_order):
        order = make_order(status=OrderStatus.ASSIGNED, assignee=driver_user)

        response = driver_client.post(
            DELIVERIES_URL,
            {"order_id": str(order.id), "llenas_entregadas": 2, "vacias_recibidas": 2},
            format="json",
        )

        assert response.status_code == 201
        assert response.json()["order_id"] == str(order.id)
        order.refresh_from_db()
        assert order.status == OrderStatus.DELIVERED
        assert Delivery.objects.filter(order=order).count() == 1
        event = AuditEvent.objects.get(entity="delivery")
        assert event.actor_id == driver_user.id
        assert event.details["order_id"] == str(order.id)

    def test_pending_order_is_not_deliverable(self, admin_client, make_order):
        order = make_order(status=OrderStatus.PENDING)

        response = admin_client.post(
            DELIVERIES_URL,
            {"order_id": str(order.id), "llenas_entregadas": 1, "vacias_recibidas": 1},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "order_not_deliverable"
        assert not Delivery.objects.exists()

    def test_second_delivery_is_rejected(self, admin_client, make_order, driver_user):
        order = make_order(status=OrderStatus.ASSIGNED, assignee=driver_user)
        payload = {
            "order_id": str(order.id),
            "llenas_entregadas": 1,
            "vacias_recibidas": 1,
        }

        assert admin_client.post(DELIVERIES_URL, payload, format="json").status_code == 201
        second = admin_client.post(DELIVERIES_URL, payload, format="json")

        assert second.status_code == 400
        assert Delivery.objects.count() == 1

    def test_negative_quantity(self, admin_client, make_order, driver_user):
        order = make_order(status=OrderStatus.ASSIGNED, assignee=driver_user)

        response = admin_client.post(
            DELIVERIES_URL,
            {"order_id": str(order.id), "llenas_entregadas": -1, "vacias_recibidas": 0},
            format="json",
        )

        assert response.status_code == 400
        order.refresh_from_db()
        assert order.status == OrderStatus.ASSIGNED

    def test_unknown_order(self, admin_client):
        response = admin_client.post(
            DELIVERIES_URL,
            {"order_id": str(uuid4()), "llenas_entregadas": 1, "vacias_recibidas": 1},
            format="json",
        )
        assert response.status_code == 404

    def test_driver_cannot_deliver_foreign_order(
        self, driver_client, make_order, other_driver
    ):
        order = make_order(status=OrderStatus.ASSIGNED, assignee=other_driver)

        response = driver_client.post(
            DELIVERIES_URL,
            {"order_id": str(order.id), "llenas_entregadas": 1, "vacias_recibidas": 1},
            format="json",
        )

        assert response.status_code == 403
        order.refresh_from_db()
        assert order.status == OrderStatus.ASSIGNED
        assert not Delivery.objects.exists()

    def test_requires_authentication(self, api_client):
        response = api_client.post(DELIVERIES_URL, {}, format="json")
        assert response.status_code == 401


class TestRegisterFailedDelivery:
    def test_keeps_schedule_and_returns_to_assigned(
        self, driver_client, driver_user, make_order
    ):
        order = make_order(status=OrderStatus.IN_TRANSIT, assignee=driver_user)

        response = driver_client.post(
            FAILED_URL,
            {"order_id": str(order.id), "reason": "cliente ausente"},
            format="json",
        )

        assert response.status_code == 201
        assert response.json()["reprogram_date"] is None
        order.refresh_from_db()
        assert order.status == OrderStatus.ASSIGNED
        assert order.assignee_id == driver_user.id
        assert order.scheduled_date == datetime.date(2026, 2, 16)
        assert order.time_slot == "MAÑANA"

    def test_reprograms_order(self, admin_client, make_order, driver_user):
        order = make_order(status=OrderStatus.ASSIGNED, assignee=driver_user)

        response = admin_client.post(
            FAILED_URL,
            {
                "order_id": str(order.id),
                "reason": "portón cerrado",
                "reprogram_date": "2026-02-18",
                "reprogram_time_slot": "TARDE",
            },
            format="json",
        )

        assert response.status_code == 201
        order.refresh_from_db()
        assert order.scheduled_date == datetime.date(2026, 2, 18)
        assert order.time_slot == "TARDE"
        event = AuditEvent.objects.get(entity="delivery_failure")
        assert event.details["reprogram_date"] == "2026-02-18"

    def test_blank_reason(self, admin_client, make_order, driver_user):
        order = make_order(status=OrderStatus.ASSIGNED, assignee=driver_user)

        response = admin_client.post(
            FAILED_URL, {"order_id": str(order.id), "reason": "  "}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "missing_failure_reason"
        assert not FailedDelivery.objects.exists()

    def test_many_failures_per_order(self, admin_client, make_order, driver_user):
        order = make_order(status=OrderStatus.ASSIGNED, assignee=driver_user)
        payload = {"order_id": str(order.id), "reason": "cliente ausente"}

        admin_client.post(FAILED_URL, payload, format="json")
        admin_client.post(FAILED_URL, payload, format="json")

        assert FailedDelivery.objects.filter(order=order).count() == 2
