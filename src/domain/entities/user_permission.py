"""UserPermission child entity (a permission granted to one user)."""

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from src.domain.entities.base_entity import BaseEntity
from src.domain.value_objects.permission import Permission

if TYPE_CHECKING:
    from src.domain.entities.user import User


@dataclass(eq=False, kw_only=True)
class UserPermission(BaseEntity):
    """Permission grant owned by a User aggregate.

    Attributes:
        user_id: Owning user.
        permission: Granted permission.
    """

    user_id: UUID
    permission: Permission

    @classmethod
    def create(cls, user: "User", permission: Permission) -> "UserPermission":
        return cls(user_id=user.id, permission=permission)
