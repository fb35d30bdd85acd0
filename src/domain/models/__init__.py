"""Creation and update inputs for domain aggregates.

Plain immutable carriers of the fields each operation needs. No behavior
and no validation: the entity validates when it consumes them.
"""

from src.domain.models.tenant_models import TenantForCreation, TenantForUpdate
from src.domain.models.user_models import UserForCreation, UserForUpdate

__all__ = [
    "TenantForCreation",
    "TenantForUpdate",
    "UserForCreation",
    "UserForUpdate",
]
