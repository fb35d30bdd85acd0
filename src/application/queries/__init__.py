"""Queries (CQRS read operations).

Queries are side-effect free; handlers in queries/handlers/ return DTOs.
"""

from src.application.queries.access_queries import ListPermissions, ListRoles
from src.application.queries.tenant_queries import GetTenant, ListTenants
from src.application.queries.user_queries import (
    GetUser,
    GetUserByIdentifier,
    ListUsers,
)

__all__ = [
    "GetTenant",
    "GetUser",
    "GetUserByIdentifier",
    "ListPermissions",
    "ListRoles",
    "ListTenants",
    "ListUsers",
]
