from __future__ import annotations

import datetime

import pytest
from rest_framework.test import APIClient

from modules.accounts.constants import Role
from modules.accounts.models import User
from modules.orders.constants import OrderStatus
from modules.orders.models import Order


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


@pytest.fixture()
def admin_user():
    return User.objects.create_user(
        username="admin_test", password="testpass123", role=Role.ADMIN
    )


@pytest.fixture()
def driver_user():
    return User.objects.create_user(
        username="driver_test", password="testpass123", role=Role.DRIVER
    )


@pytest.fixture()
def other_driver():
    return User.objects.create_user(
        username="driver_other", password="testpass123", role=Role.DRIVER
    )


@pytest.fixture()
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture()
def driver_client(driver_user):
    client = APIClient()
    client.force_authenticate(user=driver_user)
    return client


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_order():
    """Factory creating an order directly in the database."""

    def _make_order(
        status: str = OrderStatus.PENDING,
        assignee: User | None = None,
        scheduled_date: datetime.date = datetime.date(2026, 2, 16),
        time_slot: str = "MAÑANA",
        quantity: int = 2,
        address: str = "Calle 1",
        zone: str = "Z1",
    ) -> Order:
        return Order.objects.create(
            address=address,
            zone=zone,
            scheduled_date=scheduled_date,
            time_slot=time_slot,
            quantity=quantity,
            status=status,
            assignee=assignee,
        )

    return _make_order
