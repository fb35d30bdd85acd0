"""Tenant query handlers.

Returns DTOs (not domain entities) to prevent leaking domain to presentation.

Architecture:
- Application layer handlers (orchestrate data retrieval)
- Returns Result[DTO, ApplicationError] (explicit error handling)
- NO domain events (queries are side-effect free)
"""

from src.application.dtos.paged_list import PagedList
from src.application.errors import ApplicationError
from src.application.mappers.tenant_mapper import to_tenant_dto, to_tenant_dtos
from src.application.queries.tenant_queries import GetTenant, ListTenants
from src.core.result import Failure, Result, Success
from src.domain.protocols.unit_of_work_protocol import UnitOfWork
from src.schemas.tenant_schemas import TenantDto


class GetTenantHandler:
    """Handler for GetTenant query."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(self, query: GetTenant) -> Result[TenantDto, ApplicationError]:
        tenant = await self._uow.tenants.find_by_id(query.tenant_id)
        if tenant is None:
            return Failure(error=ApplicationError.not_found("Tenant", query.tenant_id))
        return Success(value=to_tenant_dto(tenant))


class ListTenantsHandler:
    """Handler for ListTenants query."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(
        self, query: ListTenants
    ) -> Result[PagedList[TenantDto], ApplicationError]:
        tenants, total = await self._uow.tenants.list_page(
            query.page_number, query.page_size
        )
        return Success(
            value=PagedList(
                items=to_tenant_dtos(tenants),
                total_count=total,
                page_number=query.page_number,
                page_size=query.page_size,
            )
        )
