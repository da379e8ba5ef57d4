from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException

from inventario_api.api.router import api_router
from inventario_api.config import Settings, get_settings
from inventario_api.database import Database
from inventario_api.middleware.access_log import AccessLogMiddleware
from inventario_api.middleware.error_handler import (
    http_exception_handler,
    integrity_error_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from inventario_api.middleware.function_prefix import FunctionPrefixMiddleware
from inventario_api.middleware.request_id import RequestIdMiddleware
from inventario_api.services.counts import CountSource, DatabaseCountSource, SyntheticCountSource
from inventario_api.utils.cache import GenerationCache

_OPENAPI_TAGS = [
    {"name": "Health", "description": "Liveness check"},
    {"name": "Almacenes", "description": "Warehouses and their branches"},
    {"name": "Artículos", "description": "Item catalog"},
    {"name": "Catálogos", "description": "Brands and subcategories"},
    {"name": "Inventario", "description": "Inventory-count schedules"},
]


def build_count_source(settings: Settings, database: Database) -> CountSource:
    if settings.count_source == "synthetic":
        return SyntheticCountSource(
            database,
            GenerationCache(ttl=settings.synthetic_ttl_seconds),
            max_items=settings.synthetic_max_items,
        )
    return DatabaseCountSource(database)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    database: Database = app.state.database
    # Startup: verify database connection
    await database.ping()
    yield
    # Shutdown: dispose all connections
    await database.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its own database handle and count source.

    Without *settings* the environment is read; a missing ``DATABASE_URL``
    aborts startup with ``pydantic.ValidationError``.
    """
    settings = settings or get_settings()
    database = Database(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        echo=settings.debug,
    )

    app = FastAPI(
        title=settings.app_name,
        description="Inventory catalog and count REST API",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=_OPENAPI_TAGS,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.count_source = build_count_source(settings, database)

    # -----------------------------------------------------------------------
    # Exception handlers
    # -----------------------------------------------------------------------

    app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(IntegrityError, integrity_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # -----------------------------------------------------------------------
    # Middleware (Starlette LIFO: last add_middleware call runs outermost)
    # -----------------------------------------------------------------------

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # AccessLogMiddleware reads REQUEST_ID_CTX, so it must run inside RequestIdMiddleware.
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIdMiddleware)
    # Outermost: every other layer and the router see the normalized path.
    app.add_middleware(FunctionPrefixMiddleware, prefix=settings.function_prefix)

    app.include_router(api_router)
    return app


app = create_app()
