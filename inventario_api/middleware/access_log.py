"""Structured JSON access logging middleware.

Emits one ``INFO``-level record per request with ``method``, ``path``,
``status``, ``duration_ms`` and ``request_id``.  ``path`` is the routed path;
when the function prefix was stripped, the path as received is added under
``original_path``.
"""

import json
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from inventario_api.middleware.function_prefix import ORIGINAL_PATH_SCOPE_KEY
from inventario_api.middleware.request_id import REQUEST_ID_CTX

logger = logging.getLogger(__name__)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Emit a structured JSON access-log record after every HTTP request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response: Response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)

        record: dict[str, object] = {
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": duration_ms,
            "request_id": REQUEST_ID_CTX.get(),
        }
        original_path = request.scope.get(ORIGINAL_PATH_SCOPE_KEY)
        if original_path is not None:
            record["original_path"] = original_path
        logger.info(json.dumps(record))
        return response
