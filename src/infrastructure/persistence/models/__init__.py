"""Table definitions."""

from src.infrastructure.persistence.models.tenant import tenants_table
from src.infrastructure.persistence.models.user import (
    user_permissions_table,
    users_table,
)

__all__ = [
    "tenants_table",
    "user_permissions_table",
    "users_table",
]
