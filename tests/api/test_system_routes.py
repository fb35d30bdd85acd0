"""API tests for non-versioned system routes.

Validates behavior of root, health, liveness and config endpoints exposed
by the system router.
"""

import pytest

from src.core.config import settings


@pytest.mark.api
class TestSystemRoutes:
    """System endpoints."""

    def test_root_endpoint_returns_status_and_version(self, client) -> None:
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == settings.app_name
        assert data["status"] == "operational"
        assert data["version"] == settings.app_version

    def test_health_endpoint_returns_healthy_status(self, client) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_alive_endpoint(self, client) -> None:
        response = client.get("/alive")

        assert response.status_code == 200
        assert response.json() == {"status": "alive"}

    def test_config_endpoint_behavior_depends_on_environment(self, client) -> None:
        response = client.get("/config")

        if settings.is_development:
            assert response.status_code == 200
            data = response.json()
            assert data["environment"] == settings.environment.value
            assert data["pagination"]["max_page_size"] == settings.max_page_size
        else:
            assert response.status_code == 403

    def test_trace_id_is_echoed(self, client) -> None:
        response = client.get("/alive", headers={"X-Trace-Id": "trace-abc"})

        assert response.headers["X-Trace-Id"] == "trace-abc"

    def test_trace_id_is_generated(self, client) -> None:
        response = client.get("/alive")

        assert response.headers["X-Trace-Id"]

    def test_unknown_route_is_problem_details(self, client) -> None:
        response = client.get("/api/v1/nowhere")

        assert response.status_code == 404
        data = response.json()
        assert data["status"] == 404
        assert data["instance"] == "/api/v1/nowhere"
        assert data["trace_id"] == response.headers["X-Trace-Id"]
