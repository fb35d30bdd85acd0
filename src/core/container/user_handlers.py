"""User handler dependency factories.

Request-scoped handler instances; each request gets its own unit of work.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.infrastructure import get_unit_of_work
from src.domain.protocols.unit_of_work_protocol import UnitOfWork

if TYPE_CHECKING:
    from src.application.commands.handlers.initiate_user_and_tenant_handler import (
        InitiateUserAndTenantHandler,
    )
    from src.application.commands.handlers.user_handlers import (
        AddUserHandler,
        AddUserPermissionHandler,
        DeleteUserHandler,
        RemoveUserPermissionHandler,
        SyncUserFromIdpHandler,
        UpdateUserHandler,
        UpdateUserRoleHandler,
    )
    from src.application.queries.handlers.user_query_handlers import (
        GetUserByIdentifierHandler,
        GetUserHandler,
        ListUsersHandler,
    )


# ============================================================================
# User Command Handler Factories
# ============================================================================


async def get_add_user_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "AddUserHandler":
    from src.application.commands.handlers.user_handlers import AddUserHandler

    return AddUserHandler(uow=uow)


async def get_update_user_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "UpdateUserHandler":
    from src.application.commands.handlers.user_handlers import UpdateUserHandler

    return UpdateUserHandler(uow=uow)


async def get_sync_user_from_idp_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "SyncUserFromIdpHandler":
    from src.application.commands.handlers.user_handlers import (
        SyncUserFromIdpHandler,
    )

    return SyncUserFromIdpHandler(uow=uow)


async def get_delete_user_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "DeleteUserHandler":
    from src.application.commands.handlers.user_handlers import DeleteUserHandler

    return DeleteUserHandler(uow=uow)


async def get_update_user_role_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "UpdateUserRoleHandler":
    from src.application.commands.handlers.user_handlers import (
        UpdateUserRoleHandler,
    )

    return UpdateUserRoleHandler(uow=uow)


async def get_add_user_permission_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "AddUserPermissionHandler":
    from src.application.commands.handlers.user_handlers import (
        AddUserPermissionHandler,
    )

    return AddUserPermissionHandler(uow=uow)


async def get_remove_user_permission_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "RemoveUserPermissionHandler":
    from src.application.commands.handlers.user_handlers import (
        RemoveUserPermissionHandler,
    )

    return RemoveUserPermissionHandler(uow=uow)


async def get_initiate_user_and_tenant_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "InitiateUserAndTenantHandler":
    """Get InitiateUserAndTenant handler (request-scoped).

    Tenant and user share this request's unit of work, so they are
    committed together.
    """
    from src.application.commands.handlers.initiate_user_and_tenant_handler import (
        InitiateUserAndTenantHandler,
    )

    return InitiateUserAndTenantHandler(uow=uow)


# ============================================================================
# User Query Handler Factories
# ============================================================================


async def get_get_user_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "GetUserHandler":
    from src.application.queries.handlers.user_query_handlers import GetUserHandler

    return GetUserHandler(uow=uow)


async def get_get_user_by_identifier_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "GetUserByIdentifierHandler":
    from src.application.queries.handlers.user_query_handlers import (
        GetUserByIdentifierHandler,
    )

    return GetUserByIdentifierHandler(uow=uow)


async def get_list_users_handler(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> "ListUsersHandler":
    from src.application.queries.handlers.user_query_handlers import (
        ListUsersHandler,
    )

    return ListUsersHandler(uow=uow)
