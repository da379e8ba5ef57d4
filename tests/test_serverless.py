"""Tests for inventario_api/serverless.py.

Event normalization is tested on its own, the handler wiring with a mocked
adapter, and the full path through the real Mangum adapter against a seeded
SQLite catalog.
"""

import asyncio
import json
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI

from inventario_api.config import Settings
from inventario_api.models.base import Base
from inventario_api.serverless import build_handler, handler, normalize_event
from inventario_api.utils.paths import PLACEHOLDER_BASE_URL

# ---------------------------------------------------------------------------
# normalize_event
# ---------------------------------------------------------------------------


def test_event_path_is_normalized():
    event = {
        "httpMethod": "GET",
        "path": "/.netlify/functions/api/articulos/TRU-MAR-16/",
        "rawUrl": "https://inventario.netlify.app/.netlify/functions/api/articulos/TRU-MAR-16/",
        "headers": {"host": "inventario.netlify.app"},
    }
    normalized = normalize_event(event)
    assert normalized["path"] == "/articulos/TRU-MAR-16"
    assert normalized["rawUrl"] == "https://inventario.netlify.app/articulos/TRU-MAR-16"
    assert normalized["httpMethod"] == "GET"
    assert normalized["headers"] == {"host": "inventario.netlify.app"}


def test_original_event_is_not_mutated():
    event = {"httpMethod": "GET", "path": "/.netlify/functions/api/health"}
    normalize_event(event)
    assert event == {"httpMethod": "GET", "path": "/.netlify/functions/api/health"}


def test_missing_raw_url_gets_placeholder():
    normalized = normalize_event({"httpMethod": "GET", "path": "/.netlify/functions/api/health"})
    assert normalized["rawUrl"] == f"{PLACEHOLDER_BASE_URL}/health"


def test_event_without_path_is_returned_unchanged():
    event = {"httpMethod": "GET"}
    assert normalize_event(event) is event


def test_api_gateway_keys_are_filled_in():
    normalized = normalize_event({"httpMethod": "GET", "path": "/health"})
    assert normalized["resource"] == "/{proxy+}"
    assert normalized["requestContext"] == {}


def test_existing_request_context_is_kept():
    context = {"requestId": "abc"}
    normalized = normalize_event({"path": "/health", "requestContext": context})
    assert normalized["requestContext"] is context


def test_custom_prefix():
    normalized = normalize_event({"path": "/fn/api/health"}, prefix="/fn")
    assert normalized["path"] == "/health"


def test_normalize_event_is_idempotent():
    once = normalize_event({"path": "/.netlify/functions/api/almacenes/index.html"})
    assert normalize_event(once) == once


# ---------------------------------------------------------------------------
# build_handler
# ---------------------------------------------------------------------------


@pytest.fixture
def prefixed_app(settings: Settings):
    from inventario_api.main import create_app

    return create_app(settings.model_copy(update={"function_prefix": "/fn"}))


def test_handler_passes_normalized_event_to_adapter(prefixed_app):
    adapter = MagicMock(return_value={"statusCode": 200})
    with patch("inventario_api.serverless.Mangum", return_value=adapter) as mangum_cls:
        fn = build_handler(prefixed_app)

    context = object()
    result = fn({"httpMethod": "GET", "path": "/fn/api/health/"}, context)

    assert result == {"statusCode": 200}
    mangum_cls.assert_called_once_with(prefixed_app, lifespan="off")
    event, passed_context = adapter.call_args.args
    assert event["path"] == "/health"
    assert passed_context is context


def test_module_handler_is_callable():
    assert callable(handler)


# ---------------------------------------------------------------------------
# Real adapter
# ---------------------------------------------------------------------------


@pytest.fixture
def hosted_app(settings: Settings) -> Iterator[FastAPI]:
    """Seeded app with synthetic counts, set up on the loop the adapter runs on.

    Mangum drives each invocation with ``run_until_complete`` on the current
    event loop, so the schema, the seed and the final dispose share that loop
    with the pooled SQLite connections.
    """
    from inventario_api.main import create_app
    from seed.seed import load_seed_file, seed_catalog

    application = create_app(settings.model_copy(update={"count_source": "synthetic"}))
    database = application.state.database

    async def prepare() -> None:
        async with database.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with database.session() as session, session.begin():
            await seed_catalog(session, load_seed_file())

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        loop.run_until_complete(prepare())
        yield application
        loop.run_until_complete(database.dispose())
    finally:
        asyncio.set_event_loop(None)
        loop.close()


def _host_event(path: str, query: dict[str, str] | None = None) -> dict:
    raw_url = f"https://inventario.netlify.app{path}"
    if query:
        raw_url += "?" + "&".join(f"{k}={v}" for k, v in query.items())
    return {
        "path": path,
        "httpMethod": "GET",
        "headers": {"host": "inventario.netlify.app", "accept": "application/json"},
        "multiValueHeaders": {},
        "queryStringParameters": query or {},
        "multiValueQueryStringParameters": None,
        "body": None,
        "isBase64Encoded": False,
        "rawUrl": raw_url,
        "rawQuery": "",
    }


def test_real_adapter_serves_item_by_sku(hosted_app):
    fn = build_handler(hosted_app)
    result = fn(_host_event("/.netlify/functions/api/articulos/TRU-MAR-16"), None)

    assert result["statusCode"] == 200
    assert result["headers"]["content-type"] == "application/json"
    body = json.loads(result["body"])
    assert body["ok"] is True
    assert body["message"] is None
    assert body["data"]["sku"] == "TRU-MAR-16"
    assert body["data"]["Marca"]["nombre"] == "Truper"


def test_real_adapter_passes_query_string(hosted_app):
    fn = build_handler(hosted_app)
    event = _host_event("/.netlify/functions/api/inventario/conteos-pendientes", {"limit": "5"})
    result = fn(event, None)

    assert result["statusCode"] == 200
    body = json.loads(result["body"])
    assert len(body["data"]) == 5
    assert all(c["estado"] == "Programado" for c in body["data"])
    assert body["totalDocumentos"] == 7
    assert body["totalPaginas"] == 2
    assert body["paginaActual"] == 1


def test_real_adapter_returns_404_envelope(hosted_app):
    fn = build_handler(hosted_app)
    result = fn(_host_event("/.netlify/functions/api/articulos/ZZZ-404/"), None)

    assert result["statusCode"] == 404
    assert json.loads(result["body"]) == {
        "ok": False,
        "data": None,
        "message": "No se encontró el artículo ZZZ-404",
    }
