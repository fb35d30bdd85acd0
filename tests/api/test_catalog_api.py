"""API tests for the role and permission catalogs."""

import pytest


@pytest.mark.api
class TestCatalogRoutes:
    """GET /roles and GET /permissions."""

    def test_list_roles(self, client):
        response = client.get("/api/v1/roles")

        assert response.status_code == 200
        assert response.json() == [
            {"name": "Admin", "default_permissions": ["do_something_special"]},
            {"name": "User", "default_permissions": []},
        ]

    def test_list_permissions(self, client):
        response = client.get("/api/v1/permissions")

        assert response.status_code == 200
        assert response.json() == [{"name": "do_something_special"}]
