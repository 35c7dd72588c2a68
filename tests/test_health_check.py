from unittest.mock import patch

import pytest


class TestHealthCheck:
    def test_health_check_returns_200(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert set(data["services"]) == {"database", "cache"}

    @pytest.mark.parametrize("service", ["database", "cache"])
    def test_each_service_reports_latency(self, client, service):
        data = client.get("/health").json()
        assert data["services"][service]["status"] == "up"
        assert data["services"][service]["response_time_ms"] >= 0

    def test_is_public(self, api_client):
        assert api_client.get("/health").status_code == 200

    def test_cache_failure_is_unhealthy(self, client):
        with patch(
            "modules.core.views._ping_cache", side_effect=ConnectionError("down")
        ):
            response = client.get("/health")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["services"]["cache"] == {"status": "down"}
        assert data["services"]["database"]["status"] == "up"
