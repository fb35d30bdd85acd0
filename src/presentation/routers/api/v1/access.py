"""Role and permission catalog handlers.

Handler functions for the read-only catalog endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_roles        - Assignable roles with their default permissions
    list_permissions  - Grantable permissions
"""

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.application.queries.access_queries import ListPermissions, ListRoles
from src.application.queries.handlers.access_query_handlers import (
    ListPermissionsHandler,
    ListRolesHandler,
)
from src.core.container import get_list_permissions_handler, get_list_roles_handler
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.access_schemas import PermissionDto, RoleDto


async def list_roles(
    request: Request,
    handler: ListRolesHandler = Depends(get_list_roles_handler),
) -> list[RoleDto] | JSONResponse:
    """GET /api/v1/roles → 200 OK"""
    result = await handler.handle(ListRoles())

    match result:
        case Success(value=roles):
            return roles
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def list_permissions(
    request: Request,
    handler: ListPermissionsHandler = Depends(get_list_permissions_handler),
) -> list[PermissionDto] | JSONResponse:
    """GET /api/v1/permissions → 200 OK"""
    result = await handler.handle(ListPermissions())

    match result:
        case Success(value=permissions):
            return permissions
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
