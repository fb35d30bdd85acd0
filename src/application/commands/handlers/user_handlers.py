"""User command handlers.

Each handler loads (or builds) the User aggregate, applies one domain
operation, commits the unit of work and returns the user DTO. A domain
ValidationError is converted into a Failure here and nowhere else.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- Events are published by the unit of work after commit, not by handlers
"""

from src.application.commands.user_commands import (
    AddUser,
    AddUserPermission,
    DeleteUser,
    RemoveUserPermission,
    SyncUserFromIdp,
    UpdateUser,
    UpdateUserRole,
)
from src.application.errors import ApplicationError
from src.application.mappers.user_mapper import (
    to_user_dto,
    to_user_for_creation,
    to_user_for_update,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.errors import ValidationError
from src.domain.protocols.unit_of_work_protocol import UnitOfWork
from src.domain.value_objects.permission import Permission
from src.domain.value_objects.user_role import UserRole
from src.schemas.user_schemas import UserDto


class AddUserHandler:
    """Handler for AddUser command.

    Flow:
    1. Reject a tenant_id that names no live tenant (NOT_FOUND)
    2. Reject an identifier already held by a live user (CONFLICT)
    3. Create the user (default permissions for its role)
    4. Commit and return the DTO
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(self, cmd: AddUser) -> Result[UserDto, ApplicationError]:
        """Handle AddUser command.

        Returns:
            Success(UserDto) on creation.
            Failure(ApplicationError) on validation error, unknown tenant or
                duplicate identifier.

        Side Effects:
            - Publishes UserCreated after commit
        """
        if cmd.user.tenant_id is not None:
            tenant = await self._uow.tenants.find_by_id(cmd.user.tenant_id)
            if tenant is None:
                return Failure(
                    error=ApplicationError.not_found("Tenant", cmd.user.tenant_id)
                )

        try:
            user = User.create(to_user_for_creation(cmd.user))
        except ValidationError as exc:
            return Failure(error=ApplicationError.from_validation_error(exc))

        if await self._uow.users.identifier_in_use(user.identifier):
            return Failure(
                error=ApplicationError.duplicate_identifier(user.identifier)
            )

        self._uow.users.add(user)
        await self._uow.commit()
        return Success(value=to_user_dto(user))


class UpdateUserHandler:
    """Handler for UpdateUser command."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(self, cmd: UpdateUser) -> Result[UserDto, ApplicationError]:
        user = await self._uow.users.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=ApplicationError.not_found("User", cmd.user_id))

        try:
            user.update(to_user_for_update(cmd.user))
        except ValidationError as exc:
            await self._uow.rollback()
            return Failure(error=ApplicationError.from_validation_error(exc))

        await self._uow.commit()
        return Success(value=to_user_dto(user))


class SyncUserFromIdpHandler:
    """Handler for SyncUserFromIdp command.

    Looks the user up by identity-provider subject (inside the acting
    user's tenant scope) and copies the profile claims onto it. The claims
    go through the same validation as a regular update.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(
        self, cmd: SyncUserFromIdp
    ) -> Result[UserDto, ApplicationError]:
        user = await self._uow.users.find_by_identifier(cmd.identifier)
        if user is None:
            return Failure(error=ApplicationError.not_found("User", cmd.identifier))

        profile = cmd.profile
        try:
            user.update_from_idp(
                first_name=profile.first_name,
                last_name=profile.last_name,
                email=profile.email,
                username=profile.username,
            )
        except ValidationError as exc:
            await self._uow.rollback()
            return Failure(error=ApplicationError.from_validation_error(exc))

        await self._uow.commit()
        return Success(value=to_user_dto(user))


class DeleteUserHandler:
    """Handler for DeleteUser command (soft delete)."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(self, cmd: DeleteUser) -> Result[None, ApplicationError]:
        user = await self._uow.users.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=ApplicationError.not_found("User", cmd.user_id))

        await self._uow.users.remove(user)
        await self._uow.commit()
        return Success(value=None)


class UpdateUserRoleHandler:
    """Handler for UpdateUserRole command.

    Unknown or blank role names fail validation before the user is loaded.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(
        self, cmd: UpdateUserRole
    ) -> Result[UserDto, ApplicationError]:
        try:
            role = UserRole.of(cmd.role)
        except ValidationError as exc:
            return Failure(error=ApplicationError.from_validation_error(exc))

        user = await self._uow.users.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=ApplicationError.not_found("User", cmd.user_id))

        user.update_role(role)
        await self._uow.commit()
        return Success(value=to_user_dto(user))


class AddUserPermissionHandler:
    """Handler for AddUserPermission command."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(
        self, cmd: AddUserPermission
    ) -> Result[UserDto, ApplicationError]:
        try:
            permission = Permission.of(cmd.permission)
        except ValidationError as exc:
            return Failure(error=ApplicationError.from_validation_error(exc))

        user = await self._uow.users.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=ApplicationError.not_found("User", cmd.user_id))

        user.add_permission(permission)
        await self._uow.commit()
        return Success(value=to_user_dto(user))


class RemoveUserPermissionHandler:
    """Handler for RemoveUserPermission command."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(
        self, cmd: RemoveUserPermission
    ) -> Result[UserDto, ApplicationError]:
        try:
            permission = Permission.of(cmd.permission)
        except ValidationError as exc:
            return Failure(error=ApplicationError.from_validation_error(exc))

        user = await self._uow.users.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=ApplicationError.not_found("User", cmd.user_id))

        user.remove_permission(permission)
        await self._uow.commit()
        return Success(value=to_user_dto(user))
