"""Domain enums.

Usage:
    from src.domain.enums import PermissionName, RoleName
"""

from src.domain.enums.permission_name import PermissionName
from src.domain.enums.role_name import RoleName

__all__ = [
    "PermissionName",
    "RoleName",
]
