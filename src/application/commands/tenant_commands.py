"""Tenant commands (CQRS write operations).

Commands represent user intent to change tenant state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass
from uuid import UUID

from src.schemas.tenant_schemas import TenantForCreationDto, TenantForUpdateDto


@dataclass(frozen=True, kw_only=True)
class AddTenant:
    """Create a tenant.

    Example:
        >>> command = AddTenant(tenant=TenantForCreationDto(name="Acme"))
        >>> result = await handler.handle(command)
    """

    tenant: TenantForCreationDto


@dataclass(frozen=True, kw_only=True)
class UpdateTenant:
    """Replace a tenant's fields."""

    tenant_id: UUID
    tenant: TenantForUpdateDto


@dataclass(frozen=True, kw_only=True)
class DeleteTenant:
    """Soft-delete a tenant."""

    tenant_id: UUID
