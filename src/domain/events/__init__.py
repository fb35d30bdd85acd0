"""Domain events module.

Usage:
    >>> from src.domain.events import DomainEvent, TenantCreated
    >>> tenant = Tenant.create(TenantForCreation(name="Acme"))
    >>> [type(e) for e in tenant.domain_events]
    [<class 'src.domain.events.tenant_events.TenantCreated'>]
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.tenant_events import TenantCreated, TenantUpdated
from src.domain.events.user_events import (
    UserCreated,
    UserPermissionAdded,
    UserPermissionRemoved,
    UserRoleUpdated,
    UserUpdated,
)

__all__ = [
    "DomainEvent",
    "TenantCreated",
    "TenantUpdated",
    "UserCreated",
    "UserPermissionAdded",
    "UserPermissionRemoved",
    "UserRoleUpdated",
    "UserUpdated",
]
