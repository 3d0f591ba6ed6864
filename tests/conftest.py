"""
Pytest configuration and fixtures for testing.

Every test that touches storage gets its own SQLite database file in the
pytest temporary directory. HTTP tests point the application at it by
overriding the session factory dependency.
"""

import asyncio
import os

import pytest

# Settings are read when catalog modules are imported
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FILE_PATH", os.devnull)

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from catalog.storage.db import (  # noqa: E402
    create_session_factory,
    get_session_factory,
    init_db,
)


@pytest.fixture
def session_factory(tmp_path):
    """
    Provides a session factory bound to a fresh SQLite database.

    NullPool closes each connection after use, so the factory can be used
    from ``asyncio.run`` helpers and from the test client's event loop.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}", poolclass=NullPool
    )
    asyncio.run(init_db(engine))
    yield create_session_factory(engine)
    asyncio.run(engine.dispose())


@pytest.fixture
def seed(session_factory):
    """
    Stores records from synchronous tests.

    Returns:
        Callable taking records and returning them once stored.
    """
    from tests.factories import store

    def _seed(*records):
        return asyncio.run(store(session_factory, *records))

    return _seed


@pytest.fixture
def client(session_factory):
    """
    Provides a TestClient for the application backed by ``session_factory``.

    The client is not used as a context manager, so the lifespan handler
    (which would initialize the configured database) does not run.
    """
    from catalog import app

    app.dependency_overrides[get_session_factory] = lambda: session_factory
    yield TestClient(app)
    app.dependency_overrides.clear()
