"""User mapping functions.

UserDto exposes the unwrapped email (None when absent) and never includes
audit metadata, the soft-delete flag or pending events.
"""

from collections.abc import Iterable, Iterator
from uuid import UUID

from src.domain.entities.user import User
from src.domain.models.user_models import UserForCreation, UserForUpdate
from src.schemas.user_schemas import UserDto, UserForCreationDto, UserForUpdateDto


def to_user_dto(user: User) -> UserDto:
    return UserDto(
        id=user.id,
        tenant_id=user.tenant_id,
        first_name=user.first_name,
        last_name=user.last_name,
        full_name=user.full_name,
        identifier=user.identifier,
        email=user.email.as_str(),
        username=user.username,
        role=user.role.value,
        permissions=[grant.permission.value for grant in user.permissions],
    )


def to_user_dtos(users: Iterable[User]) -> Iterator[UserDto]:
    """Map lazily; nothing is read from users until the result is iterated."""
    for user in users:
        yield to_user_dto(user)


def to_user_for_creation(
    dto: UserForCreationDto, tenant_id: UUID | None = None
) -> UserForCreation:
    """Build the creation input.

    Args:
        dto: Request body.
        tenant_id: Overrides dto.tenant_id when given (e.g. a tenant created
            in the same unit of work).
    """
    return UserForCreation(
        tenant_id=tenant_id if tenant_id is not None else dto.tenant_id,
        first_name=dto.first_name,
        last_name=dto.last_name,
        identifier=dto.identifier,
        email=dto.email,
        username=dto.username,
        role=dto.role,
    )


def to_user_for_update(dto: UserForUpdateDto) -> UserForUpdate:
    return UserForUpdate(
        first_name=dto.first_name,
        last_name=dto.last_name,
        email=dto.email,
        username=dto.username,
    )
