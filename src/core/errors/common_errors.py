"""Common error classes used across all domains and layers.

Generic failure values that flow through Result types. Domain invariant
violations are NOT represented here: those are raised as
src.domain.errors.ValidationError and converted by the application layer.

Error Types:
- NotFoundError: Resource not found
- ConflictError: Resource conflicts (duplicates)

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.TENANT_NOT_FOUND,
        message="Tenant not found",
        resource_type="Tenant",
        resource_id=str(tenant_id),
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Tenant, User).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate, state conflict).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (identifier, ...).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None
