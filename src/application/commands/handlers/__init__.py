"""Command handlers.

Every handler takes a UnitOfWork, raises nothing, and returns
Result[..., ApplicationError].
"""

from src.application.commands.handlers.initiate_user_and_tenant_handler import (
    InitiateUserAndTenantHandler,
)
from src.application.commands.handlers.tenant_handlers import (
    AddTenantHandler,
    DeleteTenantHandler,
    UpdateTenantHandler,
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

__all__ = [
    "AddTenantHandler",
    "AddUserHandler",
    "AddUserPermissionHandler",
    "DeleteTenantHandler",
    "DeleteUserHandler",
    "InitiateUserAndTenantHandler",
    "RemoveUserPermissionHandler",
    "SyncUserFromIdpHandler",
    "UpdateTenantHandler",
    "UpdateUserHandler",
    "UpdateUserRoleHandler",
]
