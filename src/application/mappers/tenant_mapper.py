"""Tenant mapping functions."""

from collections.abc import Iterable, Iterator

from src.domain.entities.tenant import Tenant
from src.domain.models.tenant_models import TenantForCreation, TenantForUpdate
from src.schemas.tenant_schemas import (
    TenantDto,
    TenantForCreationDto,
    TenantForUpdateDto,
)


def to_tenant_dto(tenant: Tenant) -> TenantDto:
    return TenantDto(id=tenant.id, name=tenant.name)


def to_tenant_dtos(tenants: Iterable[Tenant]) -> Iterator[TenantDto]:
    """Map lazily; nothing is read from tenants until the result is iterated."""
    for tenant in tenants:
        yield to_tenant_dto(tenant)


def to_tenant_for_creation(dto: TenantForCreationDto) -> TenantForCreation:
    return TenantForCreation(name=dto.name)


def to_tenant_for_update(dto: TenantForUpdateDto) -> TenantForUpdate:
    return TenantForUpdate(name=dto.name)
