"""TenantRepository - SQLAlchemy implementation of the TenantRepository protocol.

Adapter for hexagonal architecture. Tenants are mapped entities, so the
repository returns the session's own instances: changes made to them are
written by the unit of work on commit.
"""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.tenant import Tenant
from src.infrastructure.persistence.models import tenants_table
from src.infrastructure.persistence.repositories.paging import fetch_page


class TenantRepository:
    """SQLAlchemy implementation of the TenantRepository protocol.

    This class does NOT inherit from the TenantRepository protocol.

    Attributes:
        session: Session of the owning unit of work.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, tenant_id: UUID) -> Tenant | None:
        """Find tenant by ID.

        Returns:
            Tenant if found and not soft-deleted, None otherwise. Repeated
            lookups within one unit of work return the same instance.
        """
        result = await self.session.execute(
            select(Tenant).where(
                tenants_table.c.id == tenant_id,
                tenants_table.c.is_deleted.is_(False),
            )
        )
        return result.scalar_one_or_none()

    async def list_page(
        self, page_number: int, page_size: int
    ) -> tuple[Iterable[Tenant], int]:
        return await fetch_page(
            self.session, Tenant, tenants_table, [], page_number, page_size
        )

    def add(self, tenant: Tenant) -> None:
        self.session.add(tenant)

    async def remove(self, tenant: Tenant) -> None:
        """Stage a soft delete (the flush turns it into an UPDATE)."""
        await self.session.delete(tenant)
