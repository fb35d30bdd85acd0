"""Commands (CQRS write operations).

Commands are immutable data containers; handlers in commands/handlers/
execute them and return Result types.
"""

from src.application.commands.tenant_commands import (
    AddTenant,
    DeleteTenant,
    UpdateTenant,
)
from src.application.commands.user_commands import (
    AddUser,
    AddUserPermission,
    DeleteUser,
    InitiateUserAndTenant,
    RemoveUserPermission,
    SyncUserFromIdp,
    UpdateUser,
    UpdateUserRole,
)

__all__ = [
    "AddTenant",
    "AddUser",
    "AddUserPermission",
    "DeleteTenant",
    "DeleteUser",
    "InitiateUserAndTenant",
    "RemoveUserPermission",
    "SyncUserFromIdp",
    "UpdateTenant",
    "UpdateUser",
    "UpdateUserRole",
]
