"""UserRole value object.

Roles are parsed case-insensitively and canonicalised ("admin" -> "Admin").
Each role carries the set of permissions a user receives when the role is
assigned.
"""

from dataclasses import dataclass
from typing import cast

from src.domain.enums import PermissionName, RoleName
from src.domain.errors import ValidationError
from src.domain.value_objects.permission import Permission

# Permissions granted when a role is assigned
ROLE_DEFAULT_PERMISSIONS: dict[RoleName, tuple[PermissionName, ...]] = {
    RoleName.ADMIN: (PermissionName.DO_SOMETHING_SPECIAL,),
    RoleName.USER: (),
}


@dataclass(frozen=True)
class UserRole:
    """Role held by a user.

    Attributes:
        name: Canonical role name.

    Raises:
        ValidationError: From of() when the input is blank or unknown.

    Example:
        >>> UserRole.of("aDmIn").value
        'Admin'
        >>> [p.value for p in UserRole.admin().default_permissions()]
        ['do_something_special']
    """

    name: RoleName

    @classmethod
    def of(cls, value: str | None) -> "UserRole":
        """Parse a role name.

        Args:
            value: Role name in any case.

        Returns:
            UserRole with the canonical name.

        Raises:
            ValidationError: If value is blank or not a known role.
        """
        ValidationError.throw_when_null_or_whitespace(
            value, "Role cannot be null or empty.", field="role"
        )
        parsed = RoleName.parse(cast(str, value))
        if parsed is None:
            raise ValidationError(f"Invalid role: {value}", field="role")
        return cls(parsed)

    @classmethod
    def admin(cls) -> "UserRole":
        return cls(RoleName.ADMIN)

    @classmethod
    def user(cls) -> "UserRole":
        return cls(RoleName.USER)

    @classmethod
    def list_names(cls) -> list[str]:
        return RoleName.values()

    @property
    def value(self) -> str:
        """Canonical role name as string."""
        return self.name.value

    def default_permissions(self) -> list[Permission]:
        """Permissions granted when this role is assigned."""
        return [Permission(name) for name in ROLE_DEFAULT_PERMISSIONS[self.name]]

    def __str__(self) -> str:
        return self.name.value
