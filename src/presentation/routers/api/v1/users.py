"""Users resource handlers.

Handler functions for user management endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_users                 - List users, optionally for one tenant
    get_user                   - Get user by id
    get_user_by_identifier     - Get user by identity-provider subject
    create_user                - Create user in an existing tenant
    initiate_user_and_tenant   - Create tenant and its first user together
    update_user                - Update names, email and username
    sync_user_from_idp         - Refresh profile from identity-provider claims
    delete_user                - Soft-delete user
    update_user_role           - Change role
    add_user_permission        - Grant permission
    remove_user_permission     - Revoke permission
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.initiate_user_and_tenant_handler import (
    InitiateUserAndTenantHandler,
)
from src.application.commands.handlers.user_handlers import (
    AddUserHandler,
    AddUserPermissionHandler,
    DeleteUserHandler,
    RemoveUserPermissionHandler,
    SyncUserFromIdpHandler,
    UpdateUserHandler,
    UpdateUserRoleHandler,
)
from src.application.commands.user_commands import (
    AddUser,
    AddUserPermission,
    DeleteUser,
    InitiateUserAndTenant,
    RemoveUserPermission,
    SyncUserFromIdp,
    UpdateUser,
    UpdateUserRole,
)
from src.application.errors import ApplicationError
from src.application.queries.handlers.user_query_handlers import (
    GetUserByIdentifierHandler,
    GetUserHandler,
    ListUsersHandler,
)
from src.application.queries.user_queries import (
    GetUser,
    GetUserByIdentifier,
    ListUsers,
)
from src.core.config import settings
from src.core.container import (
    get_add_user_handler,
    get_add_user_permission_handler,
    get_delete_user_handler,
    get_get_user_by_identifier_handler,
    get_get_user_handler,
    get_initiate_user_and_tenant_handler,
    get_list_users_handler,
    get_remove_user_permission_handler,
    get_sync_user_from_idp_handler,
    get_update_user_handler,
    get_update_user_role_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.presentation.routers.api.v1.tenants import PAGINATION_HEADER
from src.schemas.common_schemas import PaginationMeta
from src.schemas.user_schemas import (
    IdpProfileDto,
    InitiateUserAndTenantDto,
    InitiateUserAndTenantResponseDto,
    UpdateUserRoleDto,
    UserDto,
    UserForCreationDto,
    UserForUpdateDto,
    UserPermissionDto,
)

UserId = Annotated[UUID, Path(description="User UUID")]


def _error_response(request: Request, error: ApplicationError) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(
        error=error,
        request=request,
        trace_id=get_trace_id() or "",
    )


# =============================================================================
# Queries
# =============================================================================


async def list_users(
    request: Request,
    response: Response,
    page_number: Annotated[
        int, Query(ge=1, description="Page number (1-indexed)")
    ] = 1,
    page_size: Annotated[
        int, Query(ge=1, le=settings.max_page_size, description="Items per page")
    ] = settings.default_page_size,
    tenant_id: Annotated[
        UUID | None, Query(description="Only users of this tenant")
    ] = None,
    handler: ListUsersHandler = Depends(get_list_users_handler),
) -> list[UserDto] | JSONResponse:
    """List users.

    GET /api/v1/users → 200 OK (page metadata in X-Pagination)
    """
    result = await handler.handle(
        ListUsers(page_number=page_number, page_size=page_size, tenant_id=tenant_id)
    )

    match result:
        case Success(value=paged):
            response.headers[PAGINATION_HEADER] = PaginationMeta.from_paged_list(
                paged
            ).to_header()
            response.headers["Access-Control-Expose-Headers"] = PAGINATION_HEADER
            return list(paged.items)
        case Failure(error=error):
            return _error_response(request, error)


async def get_user(
    request: Request,
    user_id: UserId,
    handler: GetUserHandler = Depends(get_get_user_handler),
) -> UserDto | JSONResponse:
    """GET /api/v1/users/{user_id} → 200 OK"""
    result = await handler.handle(GetUser(user_id=user_id))

    match result:
        case Success(value=user):
            return user
        case Failure(error=error):
            return _error_response(request, error)


async def get_user_by_identifier(
    request: Request,
    identifier: Annotated[str, Path(description="Identity-provider subject")],
    handler: GetUserByIdentifierHandler = Depends(get_get_user_by_identifier_handler),
) -> UserDto | JSONResponse:
    """Look a user up by the identifier issued by the identity provider.

    GET /api/v1/users/by-identifier/{identifier} → 200 OK
    """
    result = await handler.handle(GetUserByIdentifier(identifier=identifier))

    match result:
        case Success(value=user):
            return user
        case Failure(error=error):
            return _error_response(request, error)


# =============================================================================
# Commands
# =============================================================================


async def create_user(
    request: Request,
    response: Response,
    data: UserForCreationDto,
    handler: AddUserHandler = Depends(get_add_user_handler),
) -> UserDto | JSONResponse:
    """Create a user.

    POST /api/v1/users → 201 Created

    Returns:
        UserDto on success, with a Location header.
        JSONResponse with RFC 9457 error on failure (400/404/409).
    """
    result = await handler.handle(AddUser(user=data))

    match result:
        case Success(value=user):
            response.headers["Location"] = str(
                request.url_for("get_user", user_id=str(user.id))
            )
            return user
        case Failure(error=error):
            return _error_response(request, error)


async def initiate_user_and_tenant(
    request: Request,
    response: Response,
    data: InitiateUserAndTenantDto,
    handler: InitiateUserAndTenantHandler = Depends(
        get_initiate_user_and_tenant_handler
    ),
) -> InitiateUserAndTenantResponseDto | JSONResponse:
    """Onboard a new tenant together with its first user.

    POST /api/v1/users/initiate → 201 Created

    Both aggregates are stored in one commit; the Location header points
    at the new user.
    """
    result = await handler.handle(InitiateUserAndTenant(onboarding=data))

    match result:
        case Success(value=created):
            response.headers["Location"] = str(
                request.url_for("get_user", user_id=str(created.user.id))
            )
            return created
        case Failure(error=error):
            return _error_response(request, error)


async def update_user(
    request: Request,
    user_id: UserId,
    data: UserForUpdateDto,
    handler: UpdateUserHandler = Depends(get_update_user_handler),
) -> UserDto | JSONResponse:
    """PUT /api/v1/users/{user_id} → 200 OK"""
    result = await handler.handle(UpdateUser(user_id=user_id, user=data))

    match result:
        case Success(value=user):
            return user
        case Failure(error=error):
            return _error_response(request, error)


async def sync_user_from_idp(
    request: Request,
    identifier: Annotated[str, Path(description="Identity-provider subject")],
    data: IdpProfileDto,
    handler: SyncUserFromIdpHandler = Depends(get_sync_user_from_idp_handler),
) -> UserDto | JSONResponse:
    """Copy identity-provider profile claims onto the matching user.

    POST /api/v1/users/by-identifier/{identifier}/sync → 200 OK
    """
    result = await handler.handle(
        SyncUserFromIdp(identifier=identifier, profile=data)
    )

    match result:
        case Success(value=user):
            return user
        case Failure(error=error):
            return _error_response(request, error)

async def delete_user(
    request: Request,
    user_id: UserId,
    handler: DeleteUserHandler = Depends(get_delete_user_handler),
) -> Response:
    """DELETE /api/v1/users/{user_id} → 204 No Content"""
    result = await handler.handle(DeleteUser(user_id=user_id))

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return _error_response(request, error)


async def update_user_role(
    request: Request,
    user_id: UserId,
    data: UpdateUserRoleDto,
    handler: UpdateUserRoleHandler = Depends(get_update_user_role_handler),
) -> UserDto | JSONResponse:
    """Change a user's role.

    PUT /api/v1/users/{user_id}/role → 200 OK

    Unknown role names are rejected with 400 (field "role").
    """
    result = await handler.handle(UpdateUserRole(user_id=user_id, role=data.role))

    match result:
        case Success(value=user):
            return user
        case Failure(error=error):
            return _error_response(request, error)


async def add_user_permission(
    request: Request,
    user_id: UserId,
    data: UserPermissionDto,
    handler: AddUserPermissionHandler = Depends(get_add_user_permission_handler),
) -> UserDto | JSONResponse:
    """Grant a permission. Granting one the user already holds is a no-op.

    POST /api/v1/users/{user_id}/permissions → 200 OK
    """
    result = await handler.handle(
        AddUserPermission(user_id=user_id, permission=data.permission)
    )

    match result:
        case Success(value=user):
            return user
        case Failure(error=error):
            return _error_response(request, error)


async def remove_user_permission(
    request: Request,
    user_id: UserId,
    permission: Annotated[str, Path(description="Permission name")],
    handler: RemoveUserPermissionHandler = Depends(
        get_remove_user_permission_handler
    ),
) -> UserDto | JSONResponse:
    """Revoke a permission. Revoking one the user lacks is a no-op.

    DELETE /api/v1/users/{user_id}/permissions/{permission} → 200 OK
    """
    result = await handler.handle(
        RemoveUserPermission(user_id=user_id, permission=permission)
    )

    match result:
        case Success(value=user):
            return user
        case Failure(error=error):
            return _error_response(request, error)
