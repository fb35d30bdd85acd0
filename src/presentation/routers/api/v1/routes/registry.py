"""API Route Registry - Single Source of Truth for all versioned routes.

ROUTE_REGISTRY is the authoritative list of API endpoints. Paths are
relative to the v1 prefix (settings.api_v1_prefix).

Registry order is matching order: literal user paths (/users/initiate,
/users/by-identifier/...) come before /users/{user_id}.

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix=settings.api_v1_prefix)
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.presentation.routers.api.v1.access import list_permissions, list_roles
from src.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.presentation.routers.api.v1.tenants import (
    create_tenant,
    delete_tenant,
    get_tenant,
    list_tenants,
    update_tenant,
)
from src.presentation.routers.api.v1.users import (
    add_user_permission,
    create_user,
    delete_user,
    get_user,
    get_user_by_identifier,
    initiate_user_and_tenant,
    list_users,
    remove_user_permission,
    sync_user_from_idp,
    update_user,
    update_user_role,
)
from src.schemas.access_schemas import PermissionDto, RoleDto
from src.schemas.tenant_schemas import TenantDto
from src.schemas.user_schemas import InitiateUserAndTenantResponseDto, UserDto

_VALIDATION_ERROR = ErrorSpec(status=400, description="Validation error")
_TENANT_NOT_FOUND = ErrorSpec(status=404, description="Tenant not found")
_USER_NOT_FOUND = ErrorSpec(status=404, description="User not found")
_PAGING_ERROR = ErrorSpec(status=422, description="Page number or size out of range")
_IDENTIFIER_CONFLICT = ErrorSpec(
    status=409, description="Identifier already in use"
)

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Tenants
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/tenants",
        handler=list_tenants,
        resource="tenants",
        tags=["Tenants"],
        summary="List tenants",
        description="Paged tenant list. Page metadata is returned in the X-Pagination header.",
        operation_id="list_tenants",
        response_model=list[TenantDto],
        status_code=200,
        idempotency=IdempotencyLevel.SAFE,
        errors=[_PAGING_ERROR],
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/tenants",
        handler=create_tenant,
        resource="tenants",
        tags=["Tenants"],
        summary="Create tenant",
        operation_id="create_tenant",
        response_model=TenantDto,
        status_code=201,
        errors=[_VALIDATION_ERROR],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/tenants/{tenant_id}",
        handler=get_tenant,
        resource="tenants",
        tags=["Tenants"],
        summary="Get tenant",
        operation_id="get_tenant",
        response_model=TenantDto,
        status_code=200,
        errors=[_TENANT_NOT_FOUND],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/tenants/{tenant_id}",
        handler=update_tenant,
        resource="tenants",
        tags=["Tenants"],
        summary="Update tenant",
        operation_id="update_tenant",
        response_model=TenantDto,
        status_code=200,
        errors=[_VALIDATION_ERROR, _TENANT_NOT_FOUND],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/tenants/{tenant_id}",
        handler=delete_tenant,
        resource="tenants",
        tags=["Tenants"],
        summary="Delete tenant",
        description="Soft delete: the tenant disappears from reads but its record is kept.",
        operation_id="delete_tenant",
        status_code=204,
        errors=[_TENANT_NOT_FOUND],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    # =========================================================================
    # Users
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users",
        handler=list_users,
        resource="users",
        tags=["Users"],
        summary="List users",
        description="Paged user list, optionally filtered by tenant_id.",
        operation_id="list_users",
        response_model=list[UserDto],
        status_code=200,
        idempotency=IdempotencyLevel.SAFE,
        errors=[_PAGING_ERROR],
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/users",
        handler=create_user,
        resource="users",
        tags=["Users"],
        summary="Create user",
        operation_id="create_user",
        response_model=UserDto,
        status_code=201,
        errors=[_VALIDATION_ERROR, _TENANT_NOT_FOUND, _IDENTIFIER_CONFLICT],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/users/initiate",
        handler=initiate_user_and_tenant,
        resource="users",
        tags=["Users"],
        summary="Create tenant and first user",
        description="Onboarding: creates a tenant and its first user in one commit.",
        operation_id="initiate_user_and_tenant",
        response_model=InitiateUserAndTenantResponseDto,
        status_code=201,
        errors=[_VALIDATION_ERROR, _IDENTIFIER_CONFLICT],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/by-identifier/{identifier}",
        handler=get_user_by_identifier,
        resource="users",
        tags=["Users"],
        summary="Get user by identifier",
        operation_id="get_user_by_identifier",
        response_model=UserDto,
        status_code=200,
        errors=[_USER_NOT_FOUND],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/users/by-identifier/{identifier}/sync",
        handler=sync_user_from_idp,
        resource="users",
        tags=["Users"],
        summary="Sync user from identity provider",
        description="Copies profile claims (names, email, username) issued by the identity provider onto the user.",
        operation_id="sync_user_from_idp",
        response_model=UserDto,
        status_code=200,
        errors=[_VALIDATION_ERROR, _USER_NOT_FOUND],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/{user_id}",
        handler=get_user,
        resource="users",
        tags=["Users"],
        summary="Get user",
        operation_id="get_user",
        response_model=UserDto,
        status_code=200,
        errors=[_USER_NOT_FOUND],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/users/{user_id}",
        handler=update_user,
        resource="users",
        tags=["Users"],
        summary="Update user",
        operation_id="update_user",
        response_model=UserDto,
        status_code=200,
        errors=[_VALIDATION_ERROR, _USER_NOT_FOUND],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/users/{user_id}",
        handler=delete_user,
        resource="users",
        tags=["Users"],
        summary="Delete user",
        operation_id="delete_user",
        status_code=204,
        errors=[_USER_NOT_FOUND],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/users/{user_id}/role",
        handler=update_user_role,
        resource="users",
        tags=["Users"],
        summary="Update user role",
        operation_id="update_user_role",
        response_model=UserDto,
        status_code=200,
        errors=[_VALIDATION_ERROR, _USER_NOT_FOUND],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/users/{user_id}/permissions",
        handler=add_user_permission,
        resource="users",
        tags=["Users"],
        summary="Grant permission",
        operation_id="add_user_permission",
        response_model=UserDto,
        status_code=200,
        errors=[_VALIDATION_ERROR, _USER_NOT_FOUND],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/users/{user_id}/permissions/{permission}",
        handler=remove_user_permission,
        resource="users",
        tags=["Users"],
        summary="Revoke permission",
        operation_id="remove_user_permission",
        response_model=UserDto,
        status_code=200,
        errors=[_VALIDATION_ERROR, _USER_NOT_FOUND],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    # =========================================================================
    # Role and permission catalog (static, no error responses)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/roles",
        handler=list_roles,
        resource="catalog",
        tags=["Catalog"],
        summary="List roles",
        description="Assignable roles and the permissions each grants on assignment.",
        operation_id="list_roles",
        response_model=list[RoleDto],
        status_code=200,
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/permissions",
        handler=list_permissions,
        resource="catalog",
        tags=["Catalog"],
        summary="List permissions",
        operation_id="list_permissions",
        response_model=list[PermissionDto],
        status_code=200,
        idempotency=IdempotencyLevel.SAFE,
    ),
]
