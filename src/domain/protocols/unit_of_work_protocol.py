"""UnitOfWork protocol.

A unit of work groups repository changes into one commit. On commit it
stamps audit metadata, turns removals into soft deletes, persists every
tracked aggregate and then publishes the domain events the aggregates
queued, oldest first.
"""

from typing import Protocol

from src.domain.protocols.tenant_repository import TenantRepository
from src.domain.protocols.user_repository import UserRepository


class UnitOfWork(Protocol):
    """Unit of work protocol (port).

    Attributes:
        tenants: Tenant repository bound to this unit of work.
        users: User repository bound to this unit of work.
    """

    tenants: TenantRepository
    users: UserRepository

    async def commit(self) -> None:
        """Persist staged changes, then publish and clear queued events."""
        ...

    async def rollback(self) -> None:
        """Discard staged changes and their queued events."""
        ...
