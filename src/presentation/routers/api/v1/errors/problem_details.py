"""RFC 9457 Problem Details for HTTP APIs.

Pydantic models for structured error responses.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> ErrorDetail(
        ...     field="email",
        ...     code="invalid_email",
        ...     message="Please provide a valid email address.",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: Request path of this occurrence
        errors: Field-specific errors (validation failures only)
        trace_id: Request trace ID for debugging

    Examples:
        >>> ProblemDetails(
        ...     type="http://localhost:8000/errors/command_validation_failed",
        ...     title="Validation Failed",
        ...     status=400,
        ...     detail="Please provide a tenant name.",
        ...     instance="/api/v1/tenants",
        ...     errors=[ErrorDetail(
        ...         field="name",
        ...         code="validation_failed",
        ...         message="Please provide a tenant name.",
        ...     )],
        ... )
    """

    type: str = Field(..., description="URI reference identifying the problem type")
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[400])
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/tenants"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
