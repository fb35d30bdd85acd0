"""User domain events.

"Created" carries the creation-time snapshot; every later mutation carries
the user's identity only (plus the changed value where it is the whole
point of the event, e.g. the new role).

Handlers:
- LoggingEventHandler: all events
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class UserCreated(DomainEvent):
    """User created.

    Attributes:
        user_id: ID of the new user.
        tenant_id: Owning tenant (None for users outside a tenant).
        identifier: Identity-provider subject.
        email: Raw email address, or None.
        role: Role name assigned at creation.
    """

    user_id: UUID
    tenant_id: UUID | None
    identifier: str
    email: str | None
    role: str


@dataclass(frozen=True, kw_only=True)
class UserUpdated(DomainEvent):
    """User profile fields replaced (API update or identity-provider sync).

    Attributes:
        user_id: ID of the updated user.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class UserRoleUpdated(DomainEvent):
    """User role replaced and permissions reset to the role defaults.

    Attributes:
        user_id: ID of the user.
        role: New role name.
    """

    user_id: UUID
    role: str


@dataclass(frozen=True, kw_only=True)
class UserPermissionAdded(DomainEvent):
    """Permission granted to a user.

    Attributes:
        user_id: ID of the user.
        permission: Permission name granted.
    """

    user_id: UUID
    permission: str


@dataclass(frozen=True, kw_only=True)
class UserPermissionRemoved(DomainEvent):
    """Permission revoked from a user.

    Attributes:
        user_id: ID of the user.
        permission: Permission name revoked.
    """

    user_id: UUID
    permission: str
