"""Permission value object.

Wraps a PermissionName parsed case-insensitively from a string.
"""

from dataclasses import dataclass
from typing import cast

from src.domain.enums import PermissionName
from src.domain.errors import ValidationError


@dataclass(frozen=True)
class Permission:
    """A grantable permission.

    Attributes:
        name: Canonical permission name.

    Example:
        >>> Permission.of("DO_SOMETHING_SPECIAL").value
        'do_something_special'
    """

    name: PermissionName

    @classmethod
    def of(cls, value: str | None) -> "Permission":
        """Parse a permission name.

        Raises:
            ValidationError: If value is blank or not a known permission.
        """
        ValidationError.throw_when_null_or_whitespace(
            value, "Permission cannot be null or empty.", field="permission"
        )
        parsed = PermissionName.parse(cast(str, value))
        if parsed is None:
            raise ValidationError(f"Invalid permission: {value}", field="permission")
        return cls(parsed)

    @classmethod
    def do_something_special(cls) -> "Permission":
        return cls(PermissionName.DO_SOMETHING_SPECIAL)

    @classmethod
    def get_all(cls) -> list["Permission"]:
        return [cls(name) for name in PermissionName]

    @property
    def value(self) -> str:
        """Canonical permission name as string."""
        return self.name.value

    def __str__(self) -> str:
        return self.name.value
