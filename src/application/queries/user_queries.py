"""User queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetUser:
    """Fetch one live user."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetUserByIdentifier:
    """Fetch a live user by identity-provider subject."""

    identifier: str


@dataclass(frozen=True, kw_only=True)
class ListUsers:
    """Fetch one page of live users, oldest first.

    Attributes:
        page_number: 1-based page number.
        page_size: Items per page.
        tenant_id: Restrict to one tenant when given.
    """

    page_number: int = 1
    page_size: int = 10
    tenant_id: UUID | None = None
