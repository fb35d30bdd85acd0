"""Entity <-> DTO mapping functions.

Stateless module functions. Batch variants are generators and consume
their source lazily.
"""

from src.application.mappers.access_mapper import to_permission_dto, to_role_dto
from src.application.mappers.tenant_mapper import (
    to_tenant_dto,
    to_tenant_dtos,
    to_tenant_for_creation,
    to_tenant_for_update,
)
from src.application.mappers.user_mapper import (
    to_user_dto,
    to_user_dtos,
    to_user_for_creation,
    to_user_for_update,
)

__all__ = [
    "to_permission_dto",
    "to_role_dto",
    "to_tenant_dto",
    "to_tenant_dtos",
    "to_tenant_for_creation",
    "to_tenant_for_update",
    "to_user_dto",
    "to_user_dtos",
    "to_user_for_creation",
    "to_user_for_update",
]
