"""User commands (CQRS write operations).

All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).
"""

from dataclasses import dataclass
from uuid import UUID

from src.schemas.user_schemas import (
    IdpProfileDto,
    InitiateUserAndTenantDto,
    UserForCreationDto,
    UserForUpdateDto,
)


@dataclass(frozen=True, kw_only=True)
class AddUser:
    """Create a user.

    Attributes:
        user: Request body. A tenant_id, when present, must name a live tenant.
    """

    user: UserForCreationDto


@dataclass(frozen=True, kw_only=True)
class UpdateUser:
    """Replace a user's profile fields."""

    user_id: UUID
    user: UserForUpdateDto


@dataclass(frozen=True, kw_only=True)
class SyncUserFromIdp:
    """Refresh a user's profile from identity-provider claims.

    Attributes:
        identifier: Identity-provider subject of the user to refresh.
        profile: Claims to copy onto the user.
    """

    identifier: str
    profile: IdpProfileDto

@dataclass(frozen=True, kw_only=True)
class DeleteUser:
    """Soft-delete a user."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class UpdateUserRole:
    """Assign a role. Permissions are reset to the role's defaults.

    Attributes:
        user_id: Target user.
        role: Role name, any case.
    """

    user_id: UUID
    role: str


@dataclass(frozen=True, kw_only=True)
class AddUserPermission:
    """Grant a permission (idempotent)."""

    user_id: UUID
    permission: str


@dataclass(frozen=True, kw_only=True)
class RemoveUserPermission:
    """Revoke a permission (no-op when not held)."""

    user_id: UUID
    permission: str


@dataclass(frozen=True, kw_only=True)
class InitiateUserAndTenant:
    """Onboard a new tenant together with its first user.

    Both aggregates are committed in one unit of work: either both are
    stored or neither is.

    Example:
        >>> command = InitiateUserAndTenant(onboarding=InitiateUserAndTenantDto(
        ...     tenant_name="Acme", first_name="Ada", last_name="Lovelace",
        ...     identifier="auth0|123", email="ada@example.com", username="ada",
        ... ))
    """

    onboarding: InitiateUserAndTenantDto
