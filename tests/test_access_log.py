"""Tests for inventario_api/middleware/access_log.py.

Each behaviour is exercised through a minimal FastAPI test application that
wires FunctionPrefixMiddleware (outermost), RequestIdMiddleware and
AccessLogMiddleware together, matching the production configuration.
"""

import json
import logging
import uuid

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from inventario_api.middleware.access_log import AccessLogMiddleware
from inventario_api.middleware.function_prefix import FunctionPrefixMiddleware
from inventario_api.middleware.request_id import RequestIdMiddleware

_LOGGER = "inventario_api.middleware.access_log"

# ---------------------------------------------------------------------------
# Test application factory
# ---------------------------------------------------------------------------


def _make_app() -> FastAPI:
    """Minimal app with the middlewares wired in production order.

    Middleware is added in reverse dependency order:
    - AccessLogMiddleware added first      → runs innermost
    - RequestIdMiddleware                  → sets the ContextVar before the access log reads it
    - FunctionPrefixMiddleware added last  → runs outermost, rewrites the path first
    """
    app = FastAPI()
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(FunctionPrefixMiddleware)

    @app.get("/ping")
    async def ping() -> dict[str, str]:
        return {"ok": "true"}

    @app.get("/error")
    async def error_route() -> dict[str, str]:  # type: ignore[return]
        raise HTTPException(status_code=404, detail="Not found")

    return app


@pytest.fixture(scope="module")
def client() -> TestClient:
    return TestClient(_make_app(), raise_server_exceptions=False)


def _get_access_log_record(caplog: pytest.LogCaptureFixture) -> dict[str, object]:
    """Return the first parsed JSON record emitted by the access log middleware."""
    records = [r for r in caplog.records if r.name == _LOGGER]
    assert records, "No access log record found"
    return json.loads(records[0].message)  # type: ignore[return-value]


def _logged(client: TestClient, caplog: pytest.LogCaptureFixture, path: str) -> dict[str, object]:
    caplog.clear()
    with caplog.at_level(logging.INFO, logger=_LOGGER):
        client.get(path)
    return _get_access_log_record(caplog)


# ---------------------------------------------------------------------------
# Log emission
# ---------------------------------------------------------------------------


class TestAccessLogEmission:
    def test_one_record_per_request(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.clear()
        with caplog.at_level(logging.INFO, logger=_LOGGER):
            client.get("/ping")
        records = [r for r in caplog.records if r.name == _LOGGER]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO

    def test_record_has_expected_fields(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        record = _logged(client, caplog, "/ping")
        assert set(record) == {"method", "path", "status", "duration_ms", "request_id"}


# ---------------------------------------------------------------------------
# Field values
# ---------------------------------------------------------------------------


class TestAccessLogValues:
    def test_method_and_path(self, client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
        record = _logged(client, caplog, "/ping")
        assert record["method"] == "GET"
        assert record["path"] == "/ping"

    def test_status_matches_200_response(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        assert _logged(client, caplog, "/ping")["status"] == 200

    def test_status_matches_non_200_response(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        assert _logged(client, caplog, "/error")["status"] == 404

    def test_duration_ms_is_non_negative_number(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        duration = _logged(client, caplog, "/ping")["duration_ms"]
        assert isinstance(duration, (int, float))
        assert duration >= 0

    def test_request_id_matches_response_header(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.clear()
        with caplog.at_level(logging.INFO, logger=_LOGGER):
            res = client.get("/ping")
        record = _get_access_log_record(caplog)
        assert record["request_id"] == res.headers["x-request-id"]
        uuid.UUID(str(record["request_id"]))


# ---------------------------------------------------------------------------
# Prefixed paths
# ---------------------------------------------------------------------------


class TestAccessLogPrefixedPath:
    def test_routed_path_and_original_path(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        record = _logged(client, caplog, "/.netlify/functions/api/ping/")
        assert record["path"] == "/ping"
        assert record["original_path"] == "/.netlify/functions/api/ping/"
        assert record["status"] == 200
