"""SQLAlchemy repository implementations.

Each repository implements its domain port structurally (no inheritance)
and works directly on the mapped domain entities.
"""

from src.infrastructure.persistence.repositories.tenant_repository import (
    TenantRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "TenantRepository",
    "UserRepository",
]
