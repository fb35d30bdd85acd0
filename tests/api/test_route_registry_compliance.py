"""Route registry compliance tests.

Every route on the v1 router must come from ROUTE_REGISTRY, every
registry entry must reach the OpenAPI schema of the app, and the registry
must stay internally consistent.
"""

import pytest
from fastapi.routing import APIRoute

from src.core.config import settings
from src.main import app
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.routes import HTTPMethod
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY


def _served_routes() -> set[tuple[str, str]]:
    served = set()
    for route in v1_router.routes:
        if isinstance(route, APIRoute):
            for method in route.methods:
                served.add((method, route.path))
    return served


@pytest.mark.api
class TestRouteRegistryCompliance:
    """Registry vs. mounted routes."""

    def test_every_served_route_is_registered(self):
        registered = {
            (entry.method.value, settings.api_v1_prefix + entry.path)
            for entry in ROUTE_REGISTRY
        }

        assert _served_routes() == registered

    def test_operation_ids_are_unique(self):
        ids = [entry.operation_id for entry in ROUTE_REGISTRY]

        assert len(ids) == len(set(ids))

    def test_deletes_without_body_return_204(self):
        for entry in ROUTE_REGISTRY:
            if entry.method is HTTPMethod.DELETE and "permissions" not in entry.path:
                assert entry.status_code == 204
                assert entry.response_model is None

    def test_every_route_documents_errors(self):
        for entry in ROUTE_REGISTRY:
            if entry.resource == "catalog":
                continue
            assert entry.errors, entry.path

    def test_openapi_schema_builds(self):
        schema = app.openapi()

        assert f"{settings.api_v1_prefix}/tenants" in schema["paths"]

    def test_every_registered_route_is_documented(self):
        paths = app.openapi()["paths"]

        for entry in ROUTE_REGISTRY:
            path = settings.api_v1_prefix + entry.path
            assert path in paths, path
            assert entry.method.value.lower() in paths[path], path
