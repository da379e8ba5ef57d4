"""Global exception handlers that return the ``{ok, data, message}`` envelope.

Register these with the FastAPI application via ``app.add_exception_handler``.
All responses follow the ``ErrorResponse`` schema from
``inventario_api.schemas.common``; internals never reach the client.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException

from inventario_api.schemas.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def _envelope(status_code: int, message: str, data: object = None, headers=None) -> JSONResponse:
    body = ErrorResponse(data=data, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Convert ``HTTPException`` (including routing 404/405) to the error envelope.

    ``exc.detail`` becomes ``message``.  Response headers carried by the
    exception, such as ``Allow`` on a 405, are forwarded.
    """
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    headers = dict(exc.headers) if exc.headers else None
    return _envelope(exc.status_code, detail, headers=headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Convert ``RequestValidationError`` to a 422 envelope listing each failing field."""
    details: list[ErrorDetail] = []
    for error in exc.errors():
        # ``loc`` is a tuple like ``("body", "sku")``; drop the location prefix.
        loc = error["loc"]
        field_parts = [str(part) for part in loc if part not in ("body", "query", "path")]
        field = ".".join(field_parts) if field_parts else str(loc[-1]) if loc else "unknown"
        details.append(ErrorDetail(field=field, message=error["msg"]))

    return _envelope(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "La solicitud no es válida",
        data=[d.model_dump() for d in details],
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Convert SQLAlchemy ``IntegrityError`` to a 409 envelope.

    Unique-constraint violations are detected by inspecting the driver-level
    error string for ``"unique"`` or ``"duplicate"``.
    """
    orig_str = str(exc.orig).lower() if exc.orig is not None else ""
    if "unique" in orig_str or "duplicate" in orig_str:
        message = "Ya existe un registro con el mismo identificador"
    else:
        message = "Violación de integridad en la base de datos"
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, orig_str)
    return _envelope(status.HTTP_409_CONFLICT, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log the traceback at ERROR, answer 500 with a generic message."""
    logger.error(
        "Unhandled %s on %s %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error interno del servidor")
