"""Role and permission mapping functions."""

from src.domain.value_objects.permission import Permission
from src.domain.value_objects.user_role import UserRole
from src.schemas.access_schemas import PermissionDto, RoleDto


def to_role_dto(role: UserRole) -> RoleDto:
    return RoleDto(
        name=role.value,
        default_permissions=[
            permission.value for permission in role.default_permissions()
        ],
    )


def to_permission_dto(permission: Permission) -> PermissionDto:
    return PermissionDto(name=permission.value)
