"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import TenantDto, UserForCreationDto
"""

from src.schemas.access_schemas import PermissionDto, RoleDto
from src.schemas.common_schemas import PaginationMeta, PaginationParams
from src.schemas.tenant_schemas import (
    TenantDto,
    TenantForCreationDto,
    TenantForUpdateDto,
)
from src.schemas.user_schemas import (
    IdpProfileDto,
    InitiateUserAndTenantDto,
    InitiateUserAndTenantResponseDto,
    UpdateUserRoleDto,
    UserDto,
    UserForCreationDto,
    UserForUpdateDto,
    UserPermissionDto,
)

__all__ = [
    # Access
    "PermissionDto",
    "RoleDto",
    # Common
    "PaginationMeta",
    "PaginationParams",
    # Tenant
    "TenantDto",
    "TenantForCreationDto",
    "TenantForUpdateDto",
    # User
    "IdpProfileDto",
    "InitiateUserAndTenantDto",
    "InitiateUserAndTenantResponseDto",
    "UpdateUserRoleDto",
    "UserDto",
    "UserForCreationDto",
    "UserForUpdateDto",
    "UserPermissionDto",
]
