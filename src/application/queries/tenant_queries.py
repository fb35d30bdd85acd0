"""Tenant queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetTenant:
    """Fetch one live tenant."""

    tenant_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListTenants:
    """Fetch one page of live tenants, oldest first.

    Attributes:
        page_number: 1-based page number.
        page_size: Items per page.
    """

    page_number: int = 1
    page_size: int = 10
