"""Integration tests for bulk dispatch assignment.

The batch is all-or-nothing: a missing order or an unknown driver leaves
every order and the assignment history untouched.  Any status, DELIVERED
included, may be assigned.
"""

from __future__ import annotations

from uuid import uuid4

import pytest

from modules.audit.models import AuditEvent
from modules.deliveries.models import Delivery
from modules.dispatch.models import Assignment
from modules.orders.constants import OrderStatus

pytestmark = pytest.mark.integration

ASSIGN_URL = "/api/v1/dispatch/assign/"


def _assign(client, order_ids, driver_id):
    return client.post(
        ASSIGN_URL,
        {"order_ids": [str(i) for i in order_ids], "driver_id": str(driver_id)},
        format="json",
    )


class TestAssignOrders:
    def test_assigns_batch(self, admin_client, admin_user, make_order, driver_user):
        a, b = make_order(), make_order()

        response = _assign(admin_client, [a.id, b.id], driver_user.id)

        assert response.status_code == 204
        for order in (a, b):
            order.refresh_from_db()
            assert order.status == OrderStatus.ASSIGNED
            assert order.assignee_id == driver_user.id
        assert Assignment.objects.count() == 2
        events = AuditEvent.objects.filter(action="assigned")
        assert events.count() == 2
        assert {e.entity_id for e in events} == {a.id, b.id}
        assert all(e.actor_id == admin_user.id for e in events)
        assert all(e.details == {"driver_id": str(driver_user.id)} for e in events)

    def test_missing_order_rolls_back_everything(
        self, admin_client, make_order, driver_user
    ):
        a, b = make_order(), make_order()
        missing = uuid4()

        response = _assign(admin_client, [a.id, b.id, missing], driver_user.id)

        assert response.status_code == 404
        assert str(missing) in response.json()["errors"][0]["detail"]
        for order in (a, b):
            order.refresh_from_db()
            assert order.status == OrderStatus.PENDING
            assert order.assignee_id is None
        assert not Assignment.objects.exists()
        assert not AuditEvent.objects.exists()

    def test_empty_batch(self, admin_client, driver_user):
        response = _assign(admin_client, [], driver_user.id)
        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "empty_assignment"

    def test_unknown_driver(self, admin_client, make_order):
        order = make_order()

        response = _assign(admin_client, [order.id], uuid4())

        assert response.status_code == 404
        order.refresh_from_db()
        assert order.status == OrderStatus.PENDING

    def test_inactive_driver(self, admin_client, make_order, driver_user):
        driver_user.is_active = False
        driver_user.save()
        order = make_order()

        response = _assign(admin_client, [order.id], driver_user.id)

        assert response.status_code == 404

    def test_delivered_order_is_reopened(
        self, admin_client, make_order, driver_user, other_driver
    ):
        pending = make_order()
        delivered = make_order(status=OrderStatus.DELIVERED, assignee=other_driver)

        response = _assign(admin_client, [pending.id, delivered.id], driver_user.id)

        assert response.status_code == 204
        for order in (pending, delivered):
            order.refresh_from_db()
            assert order.status == OrderStatus.ASSIGNED
            assert order.assignee_id == driver_user.id
        assert Assignment.objects.count() == 2

    def test_reopened_order_can_be_delivered_again(
        self, admin_client, driver_client, make_order, driver_user
    ):
        order = make_order(status=OrderStatus.ASSIGNED, assignee=driver_user)
        payload = {"order_id": str(order.id), "llenas_entregadas": 2, "vacias_recibidas": 1}
        assert driver_client.post("/api/v1/deliveries/", payload, format="json").status_code == 201

        assert _assign(admin_client, [order.id], driver_user.id).status_code == 204
        second = driver_client.post("/api/v1/deliveries/", payload, format="json")

        assert second.status_code == 201
        order.refresh_from_db()
        assert order.status == OrderStatus.DELIVERED
        assert Delivery.objects.filter(order=order).count() == 2

    def test_reassignment_after_failure(
        self, admin_client, make_order, driver_user, other_driver
    ):
        order = make_order(status=OrderStatus.IN_TRANSIT, assignee=other_driver)

        response = _assign(admin_client, [order.id], driver_user.id)

        assert response.status_code == 204
        order.refresh_from_db()
        assert order.status == OrderStatus.ASSIGNED
        assert order.assignee_id == driver_user.id

    def test_driver_cannot_dispatch(self, driver_client, make_order, driver_user):
        order = make_order()
        response = _assign(driver_client, [order.id], driver_user.id)
        assert response.status_code == 403

    def test_malformed_order_id(self, admin_client, driver_user):
        response = admin_client.post(
            ASSIGN_URL,
            {"order_ids": ["nope"], "driver_id": str(driver_user.id)},
            format="json",
        )
        assert response.status_code == 400
