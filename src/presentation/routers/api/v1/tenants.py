"""Tenants resource handlers.

Handler functions for tenant management endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_tenants   - List tenants (paged, X-Pagination header)
    get_tenant     - Get tenant details
    create_tenant  - Create tenant (201 + Location)
    update_tenant  - Rename tenant
    delete_tenant  - Soft-delete tenant (204)
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.tenant_handlers import (
    AddTenantHandler,
    DeleteTenantHandler,
    UpdateTenantHandler,
)
from src.application.commands.tenant_commands import (
    AddTenant,
    DeleteTenant,
    UpdateTenant,
)
from src.application.queries.handlers.tenant_query_handlers import (
    GetTenantHandler,
    ListTenantsHandler,
)
from src.application.queries.tenant_queries import GetTenant, ListTenants
from src.core.config import settings
from src.core.container import (
    get_add_tenant_handler,
    get_delete_tenant_handler,
    get_get_tenant_handler,
    get_list_tenants_handler,
    get_update_tenant_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import PaginationMeta
from src.schemas.tenant_schemas import (
    TenantDto,
    TenantForCreationDto,
    TenantForUpdateDto,
)

PAGINATION_HEADER = "X-Pagination"


async def list_tenants(
    request: Request,
    response: Response,
    page_number: Annotated[
        int, Query(ge=1, description="Page number (1-indexed)")
    ] = 1,
    page_size: Annotated[
        int, Query(ge=1, le=settings.max_page_size, description="Items per page")
    ] = settings.default_page_size,
    handler: ListTenantsHandler = Depends(get_list_tenants_handler),
) -> list[TenantDto] | JSONResponse:
    """List tenants.

    GET /api/v1/tenants → 200 OK

    The page metadata travels in the X-Pagination header; the body is the
    bare list of tenants.
    """
    result = await handler.handle(
        ListTenants(page_number=page_number, page_size=page_size)
    )

    match result:
        case Success(value=paged):
            response.headers[PAGINATION_HEADER] = PaginationMeta.from_paged_list(
                paged
            ).to_header()
            response.headers["Access-Control-Expose-Headers"] = PAGINATION_HEADER
            return list(paged.items)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


async def get_tenant(
    request: Request,
    tenant_id: Annotated[UUID, Path(description="Tenant UUID")],
    handler: GetTenantHandler = Depends(get_get_tenant_handler),
) -> TenantDto | JSONResponse:
    """Get tenant details.

    GET /api/v1/tenants/{tenant_id} → 200 OK
    """
    result = await handler.handle(GetTenant(tenant_id=tenant_id))

    match result:
        case Success(value=tenant):
            return tenant
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


async def create_tenant(
    request: Request,
    response: Response,
    data: TenantForCreationDto,
    handler: AddTenantHandler = Depends(get_add_tenant_handler),
) -> TenantDto | JSONResponse:
    """Create a tenant.

    POST /api/v1/tenants → 201 Created

    Args:
        request: FastAPI request object.
        response: Used to set the Location header.
        data: Tenant creation request.
        handler: Add tenant handler (injected).

    Returns:
        TenantDto on success (201 Created).
        JSONResponse with RFC 9457 error on failure (400).
    """
    result = await handler.handle(AddTenant(tenant=data))

    match result:
        case Success(value=tenant):
            response.headers["Location"] = str(
                request.url_for("get_tenant", tenant_id=str(tenant.id))
            )
            return tenant
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


async def update_tenant(
    request: Request,
    tenant_id: Annotated[UUID, Path(description="Tenant UUID")],
    data: TenantForUpdateDto,
    handler: UpdateTenantHandler = Depends(get_update_tenant_handler),
) -> TenantDto | JSONResponse:
    """Rename a tenant.

    PUT /api/v1/tenants/{tenant_id} → 200 OK
    """
    result = await handler.handle(UpdateTenant(tenant_id=tenant_id, tenant=data))

    match result:
        case Success(value=tenant):
            return tenant
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


async def delete_tenant(
    request: Request,
    tenant_id: Annotated[UUID, Path(description="Tenant UUID")],
    handler: DeleteTenantHandler = Depends(get_delete_tenant_handler),
) -> Response:
    """Soft-delete a tenant.

    DELETE /api/v1/tenants/{tenant_id} → 204 No Content
    """
    result = await handler.handle(DeleteTenant(tenant_id=tenant_id))

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
