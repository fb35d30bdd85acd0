"""Query handlers (side-effect free, return DTOs)."""

from src.application.queries.handlers.access_query_handlers import (
    ListPermissionsHandler,
    ListRolesHandler,
)
from src.application.queries.handlers.tenant_query_handlers import (
    GetTenantHandler,
    ListTenantsHandler,
)
from src.application.queries.handlers.user_query_handlers import (
    GetUserByIdentifierHandler,
    GetUserHandler,
    ListUsersHandler,
)

__all__ = [
    "GetTenantHandler",
    "GetUserByIdentifierHandler",
    "GetUserHandler",
    "ListPermissionsHandler",
    "ListRolesHandler",
    "ListTenantsHandler",
    "ListUsersHandler",
]
