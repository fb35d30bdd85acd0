"""Permission names that can be granted to a user."""

from enum import Enum


class PermissionName(str, Enum):
    """Canonical permission names (snake_case)."""

    DO_SOMETHING_SPECIAL = "do_something_special"

    @classmethod
    def parse(cls, value: str) -> "PermissionName | None":
        """Case-insensitive lookup; None when unknown."""
        lowered = value.strip().lower()
        for permission in cls:
            if permission.value == lowered:
                return permission
        return None
