"""Tenant command handlers.

Flow (all three):
1. Load the tenant (update/delete) or build it (add)
2. Apply the domain operation; a ValidationError becomes a Failure
3. Commit the unit of work (stamps audit fields, publishes events)
4. Return the tenant DTO (or None for delete)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- The unit of work is injected via its protocol
"""

from src.application.commands.tenant_commands import (
    AddTenant,
    DeleteTenant,
    UpdateTenant,
)
from src.application.errors import ApplicationError
from src.application.mappers.tenant_mapper import (
    to_tenant_dto,
    to_tenant_for_creation,
    to_tenant_for_update,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.tenant import Tenant
from src.domain.errors import ValidationError
from src.domain.protocols.unit_of_work_protocol import UnitOfWork
from src.schemas.tenant_schemas import TenantDto


class AddTenantHandler:
    """Handler for AddTenant command."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(self, cmd: AddTenant) -> Result[TenantDto, ApplicationError]:
        """Create and store a tenant.

        Returns:
            Success(TenantDto) with the new tenant.
            Failure(ApplicationError) when the name is blank.

        Side Effects:
            - Publishes TenantCreated after commit
        """
        try:
            tenant = Tenant.create(to_tenant_for_creation(cmd.tenant))
        except ValidationError as exc:
            return Failure(error=ApplicationError.from_validation_error(exc))

        self._uow.tenants.add(tenant)
        await self._uow.commit()
        return Success(value=to_tenant_dto(tenant))


class UpdateTenantHandler:
    """Handler for UpdateTenant command."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(
        self, cmd: UpdateTenant
    ) -> Result[TenantDto, ApplicationError]:
        tenant = await self._uow.tenants.find_by_id(cmd.tenant_id)
        if tenant is None:
            return Failure(error=ApplicationError.not_found("Tenant", cmd.tenant_id))

        try:
            tenant.update(to_tenant_for_update(cmd.tenant))
        except ValidationError as exc:
            await self._uow.rollback()
            return Failure(error=ApplicationError.from_validation_error(exc))

        await self._uow.commit()
        return Success(value=to_tenant_dto(tenant))


class DeleteTenantHandler:
    """Handler for DeleteTenant command (soft delete)."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(self, cmd: DeleteTenant) -> Result[None, ApplicationError]:
        tenant = await self._uow.tenants.find_by_id(cmd.tenant_id)
        if tenant is None:
            return Failure(error=ApplicationError.not_found("Tenant", cmd.tenant_id))

        await self._uow.tenants.remove(tenant)
        await self._uow.commit()
        return Success(value=None)
