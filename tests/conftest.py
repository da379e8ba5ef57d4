"""Shared pytest fixtures for the Inventario API test suite.

The module-level environment setup runs at collection time, before any
``inventario_api.*`` module is imported, so the module-level ``app`` in
``inventario_api.main`` is built against a throwaway SQLite file instead of
whatever ``DATABASE_URL`` the developer's ``.env`` points at.

Every test that needs a database gets its own SQLite file under ``tmp_path``;
the schema is created from the ORM metadata because the real schema is owned
by a separate migration tool.

Fixture scopes
--------------
* ``settings``        : function: settings bound to a fresh SQLite file.
* ``app``             : function: application built by ``create_app`` with tables created.
* ``database``        : function: the application's :class:`Database` handle.
* ``async_client``    : function: httpx client wrapping the full FastAPI app.
* ``seeded_db``       : function: the catalog from ``seed/data/seed.json`` loaded.
* ``synthetic_app``   : function: same as ``app`` but serving synthetic counts.
"""

import os
import tempfile
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# ---------------------------------------------------------------------------
# Environment bootstrap, must run before any ``inventario_api.*`` import
# ---------------------------------------------------------------------------

_IMPORT_DB_PATH = Path(tempfile.gettempdir()) / f"inventario_import_{os.getpid()}.db"

# Override (not setdefault) so tests never accidentally hit a real database.
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_IMPORT_DB_PATH}"
os.environ["COUNT_SOURCE"] = "database"

from inventario_api.config import Settings  # noqa: E402
from inventario_api.database import Database  # noqa: E402
from inventario_api.models.base import Base  # noqa: E402

# ---------------------------------------------------------------------------
# Settings and application
# ---------------------------------------------------------------------------


def _sqlite_settings(tmp_path: Path, **overrides: object) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'inventario.db'}",
        **overrides,
    )


async def _build_app(settings: Settings) -> FastAPI:
    from inventario_api.main import create_app

    application = create_app(settings)
    database: Database = application.state.database
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return application


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return _sqlite_settings(tmp_path)


@pytest.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI]:
    """Application with its own SQLite database and every table created.

    httpx's ``ASGITransport`` does not run the lifespan, so tables are created
    here and the engine is disposed on teardown.
    """
    application = await _build_app(settings)
    yield application
    await application.state.database.dispose()


@pytest.fixture
def database(app: FastAPI) -> Database:
    return app.state.database


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """httpx.AsyncClient that drives the full FastAPI app in-process."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------


@pytest.fixture
async def seeded_db(database: Database) -> Database:
    """Load ``seed/data/seed.json`` into the test database.

    Resulting catalog: 3 branches, 3 warehouses (one inactive), 5 brands,
    4 departments, 10 subcategories and 20 items.
    """
    from seed.seed import load_seed_file, seed_catalog

    async with database.session() as session, session.begin():
        await seed_catalog(session, load_seed_file())
    return database


# ---------------------------------------------------------------------------
# Synthetic count source
# ---------------------------------------------------------------------------


@pytest.fixture
async def synthetic_app(tmp_path: Path) -> AsyncGenerator[FastAPI]:
    """Application configured with ``COUNT_SOURCE=synthetic``."""
    application = await _build_app(_sqlite_settings(tmp_path, count_source="synthetic"))
    yield application
    await application.state.database.dispose()


@pytest.fixture
async def synthetic_client(synthetic_app: FastAPI) -> AsyncGenerator[AsyncClient]:
    transport = ASGITransport(app=synthetic_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
