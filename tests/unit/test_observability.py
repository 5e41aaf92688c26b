"""
Unit tests for correlation IDs and logging helpers.

System role: Verification of request tracing
"""

import logging

from fastapi import FastAPI, Response
from fastapi.testclient import TestClient

from lexoffice.core.enums import RecoveryPhase
from lexoffice.models.person import CreatePersonRequest
from lexoffice.observability import configure_logging, get_correlation_id, set_correlation_id
from lexoffice.observability.correlation import clear_correlation_id
from lexoffice.observability.log_utils import mask_value, route_context, safe_log_value
from lexoffice.observability.logger import CorrelationIdFilter
from lexoffice.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware


def _app_echoing_correlation_id() -> FastAPI:
    app = FastAPI()

    @app.get("/echo")
    async def echo():
        return {"correlation_id": get_correlation_id()}

    app.add_middleware(CorrelationMiddleware, header_name="X-Correlation-ID")
    return app


class TestCorrelationId:
    def test_set_generates_when_missing(self) -> None:
        value = set_correlation_id()

        assert value
        assert get_correlation_id() == value
        clear_correlation_id()
        assert get_correlation_id() == ""

    def test_set_keeps_given_value(self) -> None:
        assert set_correlation_id("abc-123") == "abc-123"
        clear_correlation_id()

    def test_unsafe_values_are_replaced(self) -> None:
        injected = set_correlation_id("x\nERROR forged line")
        too_long = set_correlation_id("a" * 65)

        assert injected != "x\nERROR forged line"
        assert too_long != "a" * 65
        assert len(too_long) == 36
        clear_correlation_id()

    def test_filter_fills_placeholder_outside_requests(self) -> None:
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"


class TestCorrelationMiddleware:
    def test_incoming_header_is_propagated(self) -> None:
        client = TestClient(_app_echoing_correlation_id())

        response = client.get("/echo", headers={"X-Correlation-ID": "req-42"})

        assert response.json() == {"correlation_id": "req-42"}
        assert response.headers["X-Correlation-ID"] == "req-42"

    def test_header_is_generated_when_absent(self) -> None:
        client = TestClient(_app_echoing_correlation_id())

        response = client.get("/echo")

        assert response.headers["X-Correlation-ID"] == response.json()["correlation_id"]
        assert response.headers["X-Correlation-ID"]


class TestRequestLoggingMiddleware:
    @staticmethod
    def _records(caplog) -> list[logging.LogRecord]:
        return [r for r in caplog.records if r.name == "lexoffice.observability.middleware"]

    def _client(self, slow_request_ms: float = 2000.0) -> TestClient:
        app = FastAPI()

        @app.get("/api/v1/health")
        async def health():
            return {}

        @app.get("/api/v1/drafting/usage")
        async def usage():
            return Response(content="{}", headers={"X-AI-Model": "gemini-test-pro"})

        app.add_middleware(
            RequestLoggingMiddleware, slow_request_ms=slow_request_ms, unlogged_paths=["/api/v1/health"]
        )
        return TestClient(app)

    def test_health_checks_are_not_logged(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="lexoffice.observability.middleware"):
            self._client().get("/api/v1/health")

        assert self._records(caplog) == []

    def test_logs_status_and_model(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="lexoffice.observability.middleware"):
            self._client().get("/api/v1/drafting/usage")

        (record,) = self._records(caplog)
        assert record.levelno == logging.INFO
        assert record.status_code == 200
        assert record.ai_model == "gemini-test-pro"

    def test_slow_requests_are_warnings(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="lexoffice.observability.middleware"):
            self._client(slow_request_ms=0).get("/api/v1/drafting/usage")

        assert self._records(caplog)[0].levelno == logging.WARNING


class TestLoggingHelpers:
    def test_safe_log_value_summarizes_collections(self) -> None:
        assert safe_log_value(None) == "None"
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"
        assert safe_log_value(RecoveryPhase.SEIZURE) == "SEIZURE"
        assert safe_log_value("x" * 10, max_length=4).startswith("xxxx... (truncated")

    def test_route_context_masks_personal_data_and_skips_services(self) -> None:
        request = CreatePersonRequest(name="Agro Vale Ltda", tax_id="12.345.678/0001-90")

        context = route_context(
            {"request": request, "tax_id": "12345678900", "person_service": object(), "limit": 5}
        )

        assert context == {
            "arg_request": "CreatePersonRequest(sent: name,tax_id)",
            "arg_tax_id": "*********00",
            "arg_limit": "5",
        }

    def test_mask_short_values(self) -> None:
        assert mask_value("7") == "**"

    def test_configure_logging_quiets_third_party_loggers(self) -> None:
        configure_logging("DEBUG", ["noisy.lib"])

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("noisy.lib").level == logging.WARNING
