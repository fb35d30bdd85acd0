"""InitiateUserAndTenant handler.

Onboards a new organization: creates the tenant, then its first user
pointing at that tenant, and commits both in one unit of work.

Flow:
1. Reject an identifier already held by a live user (CONFLICT)
2. Create tenant, then user with tenant_id = tenant.id. Both are built
   before anything is staged, so a ValidationError from either leaves
   the unit of work untouched
3. Commit once: TenantCreated then UserCreated are published
"""

from src.application.commands.user_commands import InitiateUserAndTenant
from src.application.errors import ApplicationError
from src.application.mappers.tenant_mapper import to_tenant_dto
from src.application.mappers.user_mapper import to_user_dto
from src.core.result import Failure, Result, Success
from src.domain.entities.tenant import Tenant
from src.domain.entities.user import User
from src.domain.errors import ValidationError
from src.domain.models.tenant_models import TenantForCreation
from src.domain.models.user_models import UserForCreation
from src.domain.protocols.unit_of_work_protocol import UnitOfWork
from src.schemas.user_schemas import InitiateUserAndTenantResponseDto


class InitiateUserAndTenantHandler:
    """Handler for InitiateUserAndTenant command."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(
        self, cmd: InitiateUserAndTenant
    ) -> Result[InitiateUserAndTenantResponseDto, ApplicationError]:
        dto = cmd.onboarding

        if await self._uow.users.identifier_in_use(dto.identifier):
            return Failure(error=ApplicationError.duplicate_identifier(dto.identifier))

        try:
            tenant = Tenant.create(TenantForCreation(name=dto.tenant_name))
            user = User.create(
                UserForCreation(
                    tenant_id=tenant.id,
                    first_name=dto.first_name,
                    last_name=dto.last_name,
                    identifier=dto.identifier,
                    email=dto.email,
                    username=dto.username,
                    role=dto.role,
                )
            )
        except ValidationError as exc:
            return Failure(error=ApplicationError.from_validation_error(exc))

        self._uow.tenants.add(tenant)
        self._uow.users.add(user)
        await self._uow.commit()

        return Success(
            value=InitiateUserAndTenantResponseDto(
                tenant=to_tenant_dto(tenant), user=to_user_dto(user)
            )
        )
