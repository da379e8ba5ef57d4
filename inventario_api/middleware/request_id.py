"""Request ID middleware.

Every response carries an ``X-Request-Id`` header.  When the function host
already assigned an id (``X-Nf-Request-Id``) or the caller sent
``X-Request-Id``, that value is reused so host logs and application logs
correlate; otherwise a UUID4 is generated.  The id is also stored in a
``ContextVar`` for the access log and application code.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Defaults to "" so consumers never receive ``None``.
REQUEST_ID_CTX: ContextVar[str] = ContextVar("request_id", default="")

_INBOUND_HEADERS = ("x-nf-request-id", "x-request-id")
_MAX_INBOUND_LENGTH = 128


def _inbound_request_id(request: Request) -> str | None:
    for header in _INBOUND_HEADERS:
        value = request.headers.get(header, "").strip()
        if value and len(value) <= _MAX_INBOUND_LENGTH and value.isprintable():
            return value
    return None


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Attach an ``X-Request-Id`` header to every HTTP response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = _inbound_request_id(request) or str(uuid.uuid4())
        token = REQUEST_ID_CTX.set(request_id)
        try:
            response: Response = await call_next(request)
        finally:
            REQUEST_ID_CTX.reset(token)
        response.headers["X-Request-Id"] = request_id
        return response
