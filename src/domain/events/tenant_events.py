"""Tenant domain events.

Handlers:
- LoggingEventHandler: all events
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class TenantCreated(DomainEvent):
    """Tenant created.

    Attributes:
        tenant_id: ID of the new tenant.
        name: Tenant name at creation time.
    """

    tenant_id: UUID
    name: str


@dataclass(frozen=True, kw_only=True)
class TenantUpdated(DomainEvent):
    """Tenant fields replaced.

    Carries identity only; read current state from the repository.

    Attributes:
        tenant_id: ID of the updated tenant.
    """

    tenant_id: UUID
