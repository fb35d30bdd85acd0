"""User request and response schemas.

Pydantic schemas for user API endpoints, including role/permission
changes and combined tenant+user onboarding.

Reference:
    - src/application/mappers/user_mapper.py for DTO conversion
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.enums import RoleName
from src.schemas.tenant_schemas import TenantDto


# =============================================================================
# Response Schemas
# =============================================================================


class UserDto(BaseModel):
    """User response.

    Attributes:
        email: Unwrapped address, None when the user has no email.
        permissions: Granted permission names, in grant order.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(..., description="User unique identifier")
    tenant_id: UUID | None = Field(None, description="Owning tenant")
    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    full_name: str = Field(..., description="First and last name")
    identifier: str = Field(..., description="Identity-provider subject")
    email: str | None = Field(None, description="Email address")
    username: str = Field(..., description="Username")
    role: str = Field(..., description="Role name", examples=["Admin", "User"])
    permissions: list[str] = Field(
        default_factory=list,
        description="Granted permissions",
        examples=[["do_something_special"]],
    )


class InitiateUserAndTenantResponseDto(BaseModel):
    """Response for combined onboarding (201 Created)."""

    model_config = ConfigDict(frozen=True)

    tenant: TenantDto
    user: UserDto


# =============================================================================
# Request Schemas
# =============================================================================


class UserForCreationDto(BaseModel):
    """Request schema for user creation.

    POST /api/v1/users
    Returns: 201 Created
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "first_name": "Ada",
                "last_name": "Lovelace",
                "identifier": "auth0|123",
                "email": "ada@example.com",
                "username": "ada",
                "role": "User",
            }
        },
    )

    tenant_id: UUID | None = Field(None, description="Owning tenant")
    first_name: str = Field("", description="Given name")
    last_name: str = Field("", description="Family name")
    identifier: str = Field("", description="Identity-provider subject")
    email: str | None = Field(None, description="Email address (optional)")
    username: str = Field("", description="Username")
    role: str = Field(RoleName.USER.value, description="Role name")


class UserForUpdateDto(BaseModel):
    """Request schema for user update.

    PUT /api/v1/users/{user_id}
    """

    model_config = ConfigDict(frozen=True)

    first_name: str = Field("", description="Given name")
    last_name: str = Field("", description="Family name")
    email: str | None = Field(None, description="Email address (optional)")
    username: str = Field("", description="Username")


class IdpProfileDto(BaseModel):
    """Profile claims issued by the identity provider.

    POST /api/v1/users/by-identifier/{identifier}/sync
    """

    model_config = ConfigDict(frozen=True)

    first_name: str = Field("", description="Given name claim")
    last_name: str = Field("", description="Family name claim")
    email: str | None = Field(None, description="Email claim (optional)")
    username: str = Field("", description="Preferred username claim")


class UpdateUserRoleDto(BaseModel):
    """PUT /api/v1/users/{user_id}/role"""

    model_config = ConfigDict(frozen=True)

    role: str = Field("", description="New role name", examples=["Admin"])


class UserPermissionDto(BaseModel):
    """POST /api/v1/users/{user_id}/permissions"""

    model_config = ConfigDict(frozen=True)

    permission: str = Field(
        "", description="Permission name", examples=["do_something_special"]
    )


class InitiateUserAndTenantDto(BaseModel):
    """Request schema for onboarding a new tenant with its first user.

    POST /api/v1/users/initiate
    Returns: 201 Created
    """

    model_config = ConfigDict(frozen=True)

    tenant_name: str = Field("", description="Name of the new tenant")
    first_name: str = Field("", description="Given name")
    last_name: str = Field("", description="Family name")
    identifier: str = Field("", description="Identity-provider subject")
    email: str | None = Field(None, description="Email address (optional)")
    username: str = Field("", description="Username")
    role: str = Field(RoleName.ADMIN.value, description="Role name")
