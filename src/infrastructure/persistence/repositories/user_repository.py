"""UserRepository - SQLAlchemy implementation of the UserRepository protocol.

Adapter for hexagonal architecture. Users are loaded together with their
permission grants.

Tenant scope:
    Every lookup except identifier_in_use() is restricted to the tenant
    returned by tenant_id_provider. A provider returning None leaves
    lookups unrestricted.
"""

from collections.abc import Awaitable, Callable, Iterable
from uuid import UUID

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.infrastructure.persistence.models import users_table
from src.infrastructure.persistence.repositories.paging import fetch_page

TenantIdProvider = Callable[[], Awaitable[UUID | None]]


async def _no_tenant_scope() -> UUID | None:
    return None


class UserRepository:
    """SQLAlchemy implementation of the UserRepository protocol.

    This class does NOT inherit from the UserRepository protocol (Protocol
    uses structural typing).

    Attributes:
        session: Session of the owning unit of work.
        tenant_id_provider: Resolves the tenant lookups are restricted to.

    Example:
        >>> repo = UserRepository(session, tenant_id_provider=uow.current_tenant_id)
        >>> user = await repo.find_by_identifier("auth0|123")
    """

    def __init__(
        self,
        session: AsyncSession,
        tenant_id_provider: TenantIdProvider = _no_tenant_scope,
    ) -> None:
        self.session = session
        self.tenant_id_provider = tenant_id_provider

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            Domain User entity if found, not soft-deleted and inside the
            tenant scope, None otherwise.
        """
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_identifier(self, identifier: str) -> User | None:
        """Find user by identity-provider subject (exact match).

        Users added to the current unit of work but not yet committed are
        found too (the session flushes them before querying).
        """
        return await self._find_one(users_table.c.identifier == identifier)

    async def identifier_in_use(self, identifier: str) -> bool:
        """Whether any live user holds the identifier, in any tenant."""
        user_id = await self.session.scalar(
            select(users_table.c.id)
            .where(
                users_table.c.identifier == identifier,
                users_table.c.is_deleted.is_(False),
            )
            .limit(1)
        )
        return user_id is not None

    async def list_page(
        self,
        page_number: int,
        page_size: int,
        tenant_id: UUID | None = None,
    ) -> tuple[Iterable[User], int]:
        criteria = await self._tenant_criteria()
        if tenant_id is not None:
            criteria.append(users_table.c.tenant_id == tenant_id)
        return await fetch_page(
            self.session, User, users_table, criteria, page_number, page_size
        )

    def add(self, user: User) -> None:
        self.session.add(user)

    async def remove(self, user: User) -> None:
        """Stage a soft delete of the user and its grants."""
        await self.session.delete(user)

    async def _find_one(self, criterion: ColumnElement[bool]) -> User | None:
        result = await self.session.execute(
            select(User).where(
                criterion,
                users_table.c.is_deleted.is_(False),
                *await self._tenant_criteria(),
            )
        )
        return result.scalar_one_or_none()

    async def _tenant_criteria(self) -> list[ColumnElement[bool]]:
        tenant_id = await self.tenant_id_provider()
        if tenant_id is None:
            return []
        return [users_table.c.tenant_id == tenant_id]
