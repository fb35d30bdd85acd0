"""Role and permission catalog schemas.

Read-only listings of the closed role and permission sets, so clients can
build role pickers without hard-coding names.
"""

from pydantic import BaseModel, ConfigDict, Field


class RoleDto(BaseModel):
    """Assignable role and the permissions it grants on assignment."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Canonical role name", examples=["Admin"])
    default_permissions: list[str] = Field(
        default_factory=list,
        description="Permissions granted when the role is assigned",
        examples=[["do_something_special"]],
    )


class PermissionDto(BaseModel):
    """Grantable permission."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ..., description="Canonical permission name", examples=["do_something_special"]
    )
