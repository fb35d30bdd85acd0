"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.email_address import EmailAddress
from src.domain.value_objects.permission import Permission
from src.domain.value_objects.user_role import ROLE_DEFAULT_PERMISSIONS, UserRole

__all__ = [
    "EmailAddress",
    "Permission",
    "ROLE_DEFAULT_PERMISSIONS",
    "UserRole",
]
