"""Unit tests for the role and permission catalog handlers."""

import pytest

from src.application.queries.access_queries import ListPermissions, ListRoles
from src.application.queries.handlers.access_query_handlers import (
    ListPermissionsHandler,
    ListRolesHandler,
)
from src.core.result import Success


@pytest.mark.unit
class TestCatalogHandlers:
    """Test ListRolesHandler and ListPermissionsHandler."""

    @pytest.mark.asyncio
    async def test_list_roles_with_default_permissions(self):
        result = await ListRolesHandler().handle(ListRoles())

        assert isinstance(result, Success)
        roles = {role.name: role.default_permissions for role in result.value}
        assert roles == {"Admin": ["do_something_special"], "User": []}

    @pytest.mark.asyncio
    async def test_list_permissions(self):
        result = await ListPermissionsHandler().handle(ListPermissions())

        assert isinstance(result, Success)
        assert [permission.name for permission in result.value] == [
            "do_something_special"
        ]
