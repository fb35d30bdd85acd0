"""TenantRepository protocol for tenant persistence.

Port (interface) for hexagonal architecture. Writes are staged on the
unit of work and only reach storage on commit.
"""

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from src.domain.entities.tenant import Tenant


class TenantRepository(Protocol):
    """Tenant repository protocol (port).

    Methods:
        find_by_id: Retrieve a live (not soft-deleted) tenant
        list_page: One page of live tenants plus the total count
        add: Stage a new tenant
        remove: Stage a tenant for soft deletion
    """

    async def find_by_id(self, tenant_id: UUID) -> Tenant | None:
        """Find tenant by ID.

        Returns:
            Tenant if found and not soft-deleted, None otherwise.
        """
        ...

    async def list_page(
        self, page_number: int, page_size: int
    ) -> tuple[Iterable[Tenant], int]:
        """List live tenants ordered by creation.

        Args:
            page_number: 1-based page number.
            page_size: Items per page.

        Returns:
            Tuple of (tenants on the page, total live tenants). The page may
            be a one-shot iterable.
        """
        ...

    def add(self, tenant: Tenant) -> None: ...

    async def remove(self, tenant: Tenant) -> None: ...
