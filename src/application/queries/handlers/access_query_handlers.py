"""Role and permission catalog query handlers.

The catalogs are closed sets defined by the domain, so these handlers
need no unit of work.
"""

from src.application.errors import ApplicationError
from src.application.mappers.access_mapper import to_permission_dto, to_role_dto
from src.application.queries.access_queries import ListPermissions, ListRoles
from src.core.result import Result, Success
from src.domain.value_objects.permission import Permission
from src.domain.value_objects.user_role import UserRole
from src.schemas.access_schemas import PermissionDto, RoleDto


class ListRolesHandler:
    """Handler for ListRoles query."""

    async def handle(
        self, query: ListRoles
    ) -> Result[list[RoleDto], ApplicationError]:
        return Success(
            value=[to_role_dto(UserRole.of(name)) for name in UserRole.list_names()]
        )


class ListPermissionsHandler:
    """Handler for ListPermissions query."""

    async def handle(
        self, query: ListPermissions
    ) -> Result[list[PermissionDto], ApplicationError]:
        return Success(
            value=[to_permission_dto(permission) for permission in Permission.get_all()]
        )
