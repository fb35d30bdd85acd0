"""Tenant request and response schemas.

Pydantic schemas for tenant API endpoints. Request schemas are permissive
on purpose: blank names reach the domain, which owns the validation
message.

Reference:
    - src/application/mappers/tenant_mapper.py for DTO conversion
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TenantDto(BaseModel):
    """Tenant response.

    Never carries audit metadata, the soft-delete flag or pending events.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(..., description="Tenant unique identifier")
    name: str = Field(..., description="Tenant name", examples=["Acme"])


class TenantForCreationDto(BaseModel):
    """Request schema for tenant creation.

    POST /api/v1/tenants
    Returns: 201 Created
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"name": "Acme"}},
    )

    name: str = Field("", description="Tenant name")


class TenantForUpdateDto(BaseModel):
    """Request schema for tenant update.

    PUT /api/v1/tenants/{tenant_id}
    Returns: 200 OK
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="New tenant name")
