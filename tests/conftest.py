"""
Pytest fixtures for the Stable Store API.

Each test gets its own application backed by a temporary SQLite file,
so stores never leak records between tests.
"""

from __future__ import annotations

import os

# ``stable_store_api.app`` builds a module-level app on import; keep that
# one in memory instead of creating a database file next to the package.
os.environ.setdefault("DATABASE_URL", ":memory:")

import pytest
from fastapi.testclient import TestClient

from stable_store_api.app.core.config import Settings
from stable_store_api.app.core.db import get_connection, init_db
from stable_store_api.app.main import create_app


@pytest.fixture
def app_settings(tmp_path) -> Settings:
    return Settings(database_url=str(tmp_path / "store.db"), log_level="DEBUG")


@pytest.fixture
def app(app_settings):
    return create_app(app_settings)


@pytest.fixture
def client(app):
    """FastAPI TestClient; the context manager runs startup and shutdown."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "unit.db")


@pytest.fixture
def db(db_path):
    """Migrated connection for store and service unit tests."""
    conn = get_connection(db_path)
    init_db(conn)
    try:
        yield conn
    finally:
        conn.close()
