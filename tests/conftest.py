"""Shared pytest configuration and test helpers.

Provides:
1. Marker registration (unit, api)
2. Factories for valid tenant/user domain objects
3. A mocked logger fixture for infrastructure tests
"""

import inspect
from unittest.mock import MagicMock

import pytest

from src.domain.entities.tenant import Tenant
from src.domain.entities.user import User
from src.domain.models.tenant_models import TenantForCreation
from src.domain.models.user_models import UserForCreation


# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


# Test helper functions for domain entities


def create_tenant(name: str = "Acme") -> Tenant:
    """Helper to create a valid Tenant (with its TenantCreated event queued)."""
    return Tenant.create(TenantForCreation(name=name))


def create_user(
    *,
    identifier: str = "auth0|ada",
    first_name: str = "Ada",
    last_name: str = "Lovelace",
    email: str | None = "ada@example.com",
    username: str = "ada",
    role: str = "User",
    tenant_id=None,
) -> User:
    """Helper to create a valid User (with its UserCreated event queued).

    Usage:
        user = create_user()
        admin = create_user(identifier="auth0|grace", role="Admin")
    """
    return User.create(
        UserForCreation(
            tenant_id=tenant_id,
            first_name=first_name,
            last_name=last_name,
            identifier=identifier,
            email=email,
            username=username,
            role=role,
        )
    )


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double satisfying LoggerProtocol."""
    return MagicMock()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: API tests through FastAPI TestClient")
    config.addinivalue_line(
        "markers", "integration: Tests against a real (in-memory SQLite) database"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
