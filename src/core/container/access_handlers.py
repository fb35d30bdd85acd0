"""Role and permission catalog handler factories.

The catalogs are static, so the handlers are application-scoped and take
no unit of work.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.application.queries.handlers.access_query_handlers import (
        ListPermissionsHandler,
        ListRolesHandler,
    )


@lru_cache()
def get_list_roles_handler() -> "ListRolesHandler":
    from src.application.queries.handlers.access_query_handlers import (
        ListRolesHandler,
    )

    return ListRolesHandler()


@lru_cache()
def get_list_permissions_handler() -> "ListPermissionsHandler":
    from src.application.queries.handlers.access_query_handlers import (
        ListPermissionsHandler,
    )

    return ListPermissionsHandler()
