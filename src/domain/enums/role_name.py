"""User role names.

Closed set of roles a user can hold. Values are the canonical display
names; parsing through the UserRole value object is case-insensitive.

Usage:
    from src.domain.enums import RoleName

    if user.role.name is RoleName.ADMIN:
        ...
"""

from enum import Enum


class RoleName(str, Enum):
    """Canonical user role names."""

    ADMIN = "Admin"
    """Administrator. Granted every default administrative permission."""

    USER = "User"
    """Standard user. No default permissions."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role names as strings.

        Returns:
            list[str]: ['Admin', 'User'].
        """
        return [role.value for role in cls]

    @classmethod
    def parse(cls, value: str) -> "RoleName | None":
        """Case-insensitive lookup.

        Args:
            value: Role name in any case.

        Returns:
            Matching RoleName, or None when unknown.
        """
        lowered = value.strip().lower()
        for role in cls:
            if role.value.lower() == lowered:
                return role
        return None
