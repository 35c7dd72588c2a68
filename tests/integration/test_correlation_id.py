import logging
import uuid

import pytest

pytestmark = pytest.mark.integration


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        response = client.get("/health", HTTP_X_REQUEST_ID="reparto-42")
        assert response["X-Request-ID"] == "reparto-42"

    @pytest.mark.parametrize("header", [None, "", "   "])
    def test_generates_uuid4_when_missing_or_blank(self, client, header):
        extra = {} if header is None else {"HTTP_X_REQUEST_ID": header}
        response = client.get("/health", **extra)
        request_id = response["X-Request-ID"]
        assert str(uuid.UUID(request_id, version=4)) == request_id

    def test_correlation_id_in_logs(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get("/health", HTTP_X_REQUEST_ID="log-correlation-456")
        messages = [record.getMessage() for record in caplog.records]
        assert any("log-correlation-456" in message for message in messages), messages

    def test_finished_line_names_the_caller(self, driver_client, driver_user, caplog):
        with caplog.at_level(logging.INFO):
            driver_client.get("/api/v1/orders/")
        finished = [
            record.getMessage()
            for record in caplog.records
            if "request_finished" in record.getMessage()
        ]
        assert finished
        assert str(driver_user.id) in finished[-1]

    def test_request_id_echoed_on_api_errors(self, api_client_with_correlation):
        client, cid = api_client_with_correlation
        response = client.get("/api/v1/orders/")
        assert response.status_code == 401
        assert response["X-Request-ID"] == cid
