"""Full operational scenarios through the HTTP API.

- Create, assign, deliver, then read the daily report.
- A failed delivery followed by a successful redelivery.
- Stock summary after inbound and deliveries.
"""

from __future__ import annotations

import pytest
from freezegun import freeze_time

from modules.orders.constants import OrderStatus
from modules.orders.models import Order

pytestmark = pytest.mark.integration


def _create_order(client) -> dict:
    response = client.post(
        "/api/v1/orders/",
        {
            "address": "Calle 1",
            "zone": "Z1",
            "scheduled_date": "2026-02-16",
            "time_slot": "MAÑANA",
            "quantity": 2,
        },
        format="json",
    )
    assert response.status_code == 201
    return response.json()


def _assign(client, order_id, driver_id) -> None:
    response = client.post(
        "/api/v1/dispatch/assign/",
        {"order_ids": [order_id], "driver_id": str(driver_id)},
        format="json",
    )
    assert response.status_code == 204


@freeze_time("2026-02-16 15:00:00")
def test_create_assign_deliver_and_report(admin_client, driver_client, driver_user):
    order = _create_order(admin_client)
    assert order["status"] == OrderStatus.PENDING

    _assign(admin_client, order["id"], driver_user.id)
    stored = Order.objects.get(id=order["id"])
    assert stored.status == OrderStatus.ASSIGNED
    assert stored.assignee_id == driver_user.id

    delivery = driver_client.post(
        "/api/v1/deliveries/",
        {"order_id": order["id"], "llenas_entregadas": 2, "vacias_recibidas": 2},
        format="json",
    )
    assert delivery.status_code == 201
    stored.refresh_from_db()
    assert stored.status == OrderStatus.DELIVERED

    report = admin_client.get("/api/v1/reports/daily/", {"date": "2026-02-16"})
    assert report.status_code == 200
    assert report.json() == {
        "date": "2026-02-16",
        "entregas_dia": 1,
        "llenas_entregadas": 2,
        "vacias_recibidas": 2,
        "pendiente": 0,
    }


@freeze_time("2026-02-16 15:00:00")
def test_failed_delivery_then_redelivery(admin_client, driver_client, driver_user):
    order = _create_order(admin_client)
    _assign(admin_client, order["id"], driver_user.id)

    failed = driver_client.post(
        "/api/v1/deliveries/failed/",
        {"order_id": order["id"], "reason": "cliente ausente"},
        format="json",
    )
    assert failed.status_code == 201

    stored = Order.objects.get(id=order["id"])
    assert stored.status == OrderStatus.ASSIGNED
    assert str(stored.scheduled_date) == "2026-02-16"
    assert stored.time_slot == "MAÑANA"

    delivered = driver_client.post(
        "/api/v1/deliveries/",
        {"order_id": order["id"], "llenas_entregadas": 2, "vacias_recibidas": 1},
        format="json",
    )
    assert delivered.status_code == 201
    stored.refresh_from_db()
    assert stored.status == OrderStatus.DELIVERED


@freeze_time("2026-02-16 15:00:00")
def test_stock_summary_after_operations(admin_client, driver_user):
    response = admin_client.post(
        "/api/v1/stock/inbounds/",
        {"inbound_date": "2026-02-16", "cantidad_llenas": 100},
        format="json",
    )
    assert response.status_code == 201

    for full, empty in [(25, 5), (15, 5)]:
        order = _create_order(admin_client)
        _assign(admin_client, order["id"], driver_user.id)
        assert (
            admin_client.post(
                "/api/v1/deliveries/",
                {
                    "order_id": order["id"],
                    "llenas_entregadas": full,
                    "vacias_recibidas": empty,
                },
                format="json",
            ).status_code
            == 201
        )

    summary = admin_client.get("/api/v1/stock/summary/", {"date": "2026-02-16"}).json()

    assert summary["llenas_ingresadas"] == 100
    assert summary["llenas_entregadas"] == 40
    assert summary["vacias_recibidas"] == 10
    assert summary["llenas_disponibles_estimadas"] == 60
    assert summary["pendientes_recuperar"] == 30
    assert summary["vacias_deposito_estimadas"] == 10
