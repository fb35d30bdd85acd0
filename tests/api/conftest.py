"""API test fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.core.container import get_database
from src.main import app


@pytest.fixture
def client():
    """Provide a test client over an empty in-memory database.

    Clearing the cached Database gives each test a fresh engine; the app
    lifespan creates the schema on startup and disposes the engine on
    shutdown.
    """
    get_database.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    get_database.cache_clear()
