"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.base_entity import BaseEntity
from src.domain.entities.tenant import Tenant
from src.domain.entities.user import User
from src.domain.entities.user_permission import UserPermission

__all__ = [
    "BaseEntity",
    "Tenant",
    "User",
    "UserPermission",
]
