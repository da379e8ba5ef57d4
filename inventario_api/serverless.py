"""Function-host entry point: ``inventario_api.serverless.handler``.

The host delivers Lambda-proxy style events whose ``path`` still carries the
``/.netlify/functions/<name>`` prefix.  The event is normalized and handed to
Mangum, which drives the ASGI app.  The lifespan is off so the database
engine created with the app outlives each invocation and is reused while the
runtime stays warm.
"""

from collections.abc import Callable
from typing import Any

from fastapi import FastAPI
from mangum import Mangum

from inventario_api.main import app
from inventario_api.utils.paths import DEFAULT_FUNCTION_PREFIX, normalize_path, normalize_raw_url

Event = dict[str, Any]


def normalize_event(event: Event, prefix: str = DEFAULT_FUNCTION_PREFIX) -> Event:
    """Return a copy of *event* with a normalized ``path`` and matching ``rawUrl``.

    Events without a ``path`` are returned unchanged.  ``resource`` and
    ``requestContext`` are filled in when absent so Mangum recognizes the
    event as an API Gateway proxy request.
    """
    path = event.get("path")
    if not path:
        return event

    normalized = normalize_path(path, prefix)
    return {
        "resource": "/{proxy+}",
        "requestContext": {},
        **event,
        "path": normalized,
        "rawUrl": normalize_raw_url(event.get("rawUrl"), normalized),
    }


def build_handler(asgi_app: FastAPI) -> Callable[[Event, Any], dict[str, Any]]:
    adapter = Mangum(asgi_app, lifespan="off")
    prefix = asgi_app.state.settings.function_prefix

    def handler(event: Event, context: Any) -> dict[str, Any]:
        return adapter(normalize_event(event, prefix), context)

    return handler


handler = build_handler(app)
