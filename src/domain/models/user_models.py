"""User creation/update inputs."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import RoleName


@dataclass(frozen=True, kw_only=True)
class UserForCreation:
    """Fields for User.create().

    Attributes:
        first_name: Given name.
        last_name: Family name.
        identifier: Identity-provider subject ("sub" claim).
        email: Raw email string; blank means "no email".
        username: Login/display username.
        role: Role name, parsed case-insensitively.
        tenant_id: Owning tenant, if any.
    """

    first_name: str
    last_name: str
    identifier: str
    email: str | None
    username: str
    role: str = RoleName.USER.value
    tenant_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class UserForUpdate:
    """Fields for User.update(). The identifier is immutable."""

    first_name: str
    last_name: str
    email: str | None
    username: str
