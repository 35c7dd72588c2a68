"""E2E smoke test for the health endpoint using Playwright.

Run with:
    pytest -m e2e --base-url http://localhost:8000

Requires ``playwright install chromium``.
"""

import json

import pytest

pytestmark = [pytest.mark.e2e]


def test_health_page_renders_status_json(page):
    response = page.goto("/health")

    assert response.status == 200
    data = json.loads(page.text_content("body"))
    assert data["status"] == "healthy"
    assert data["services"]["database"]["status"] == "up"


def test_health_echoes_request_id(api_request_context):
    response = api_request_context.get(
        "/health", headers={"X-Request-ID": "e2e-gasflow-probe"}
    )

    assert response.headers["x-request-id"] == "e2e-gasflow-probe"


def test_api_is_fail_closed(api_request_context):
    response = api_request_context.get("/api/v1/orders/")

    assert response.status == 401
