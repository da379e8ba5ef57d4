"""ASGI middleware that routes requests independently of the function host prefix.

Rewrites ``scope["path"]`` through :func:`~inventario_api.utils.paths.normalize_path`
before routing, so ``/.netlify/functions/api/articulos/`` and ``/articulos``
reach the same handler.
"""

from urllib.parse import quote

from starlette.types import ASGIApp, Receive, Scope, Send

from inventario_api.utils.paths import DEFAULT_FUNCTION_PREFIX, normalize_path

ORIGINAL_PATH_SCOPE_KEY = "original_path"


class FunctionPrefixMiddleware:
    def __init__(self, app: ASGIApp, prefix: str = DEFAULT_FUNCTION_PREFIX) -> None:
        self.app = app
        self.prefix = prefix

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] in ("http", "websocket"):
            path = normalize_path(scope.get("path"), self.prefix)
            if path != scope.get("path"):
                scope = dict(scope)
                scope[ORIGINAL_PATH_SCOPE_KEY] = scope.get("path")
                scope["path"] = path
                scope["raw_path"] = quote(path).encode("ascii")
        await self.app(scope, receive, send)
