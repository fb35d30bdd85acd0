"""Tenant handler dependency factories.

Request-scoped handler instances; each request gets its own unit of work.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.infrastructure import get_unit_of_work
from src.domain.protocols.unit_of_work_protocol import UnitOfWork

if TYPE_CHECKING:
    from src.application.commands.handlers.tenant_handlers import (
        AddTenantHandler,
        DeleteTenantHandler,
        UpdateTenantHandler,
    )
    from src.application.queries.handlers.tenant_query_handlers import (
        GetTenantHandler,
        ListTenantsHandler,
    )


# ============================================================================
# Tenant Handler Factories
# ============================================================================


async def get_add_tenant_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "AddTenantHandler":
    """Get AddTenant command handler (request-scoped).

    Usage:
        @router.post("/tenants")
        async def add_tenant(
            handler: AddTenantHandler = Depends(get_add_tenant_handler)
        ):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers.tenant_handlers import AddTenantHandler

    return AddTenantHandler(uow=uow)


async def get_update_tenant_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "UpdateTenantHandler":
    from src.application.commands.handlers.tenant_handlers import (
        UpdateTenantHandler,
    )

    return UpdateTenantHandler(uow=uow)


async def get_delete_tenant_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "DeleteTenantHandler":
    from src.application.commands.handlers.tenant_handlers import (
        DeleteTenantHandler,
    )

    return DeleteTenantHandler(uow=uow)


async def get_get_tenant_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "GetTenantHandler":
    from src.application.queries.handlers.tenant_query_handlers import (
        GetTenantHandler,
    )

    return GetTenantHandler(uow=uow)


async def get_list_tenants_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "ListTenantsHandler":
    from src.application.queries.handlers.tenant_query_handlers import (
        ListTenantsHandler,
    )

    return ListTenantsHandler(uow=uow)
