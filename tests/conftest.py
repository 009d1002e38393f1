"""Shared fixtures for shortlink tests."""

from contextlib import asynccontextmanager

import pytest
from fastapi.testclient import TestClient

from shortlink.core.database import get_db, get_test_db
from shortlink.core.store import LinkStore
from shortlink.main import app
from shortlink.services.links import LinkService


@pytest.fixture
def test_db():
    """Create a test database instance."""
    db = get_test_db()
    yield db
    db.close()


@pytest.fixture
def store(test_db):
    return LinkStore(test_db)


@pytest.fixture
def service(store):
    return LinkService(store)


@pytest.fixture
def client(test_db):
    """Create a test client bound to the in-memory database."""
    # Set the dependency override BEFORE creating TestClient
    # so endpoint requests use the test database
    app.dependency_overrides[get_db] = lambda: test_db

    # The default lifespan would initialize the global database
    original_lifespan = app.router.lifespan_context

    @asynccontextmanager
    async def test_lifespan(app):
        yield

    app.router.lifespan_context = test_lifespan
    app.state.metrics.reset()

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client

    app.router.lifespan_context = original_lifespan
    app.dependency_overrides.clear()
