"""Application layer error types.

This module defines application-level errors that wrap domain errors and add
application-specific context (CQRS command/query execution failures).

Domain code raises ValidationError; handlers catch it here, at the
application boundary, and return it as a Failure.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError
from src.core.errors.domain_error import DomainError
from src.domain.errors import ValidationError

# Validation field -> specific domain error code
_FIELD_ERROR_CODES: dict[str, ErrorCode] = {
    "email": ErrorCode.INVALID_EMAIL,
    "role": ErrorCode.INVALID_ROLE,
    "permission": ErrorCode.INVALID_PERMISSION,
}


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Tenant not found",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Underlying domain error value, when there is one
        details: Additional context as key-value pairs

    Examples:
        >>> try:
        ...     tenant.update(TenantForUpdate(name=" "))
        ... except ValidationError as exc:
        ...     error = ApplicationError.from_validation_error(exc)
        >>> error.details
        {'field': 'name'}
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "ApplicationError":
        """Wrap a raised domain ValidationError."""
        details = {"field": exc.field} if exc.field else None
        return cls(
            code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            message=exc.message,
            domain_error=DomainError(
                code=_FIELD_ERROR_CODES.get(exc.field, ErrorCode.VALIDATION_FAILED),
                message=exc.message,
                details=details,
            ),
            details=details,
        )

    @classmethod
    def not_found(
        cls, resource_type: str, resource_id: UUID | str
    ) -> "ApplicationError":
        """Missing (or soft-deleted) Tenant or User."""
        message = f"{resource_type} not found"
        code = (
            ErrorCode.TENANT_NOT_FOUND
            if resource_type == "Tenant"
            else ErrorCode.USER_NOT_FOUND
        )
        return cls(
            code=ApplicationErrorCode.NOT_FOUND,
            message=message,
            domain_error=NotFoundError(
                code=code,
                message=message,
                resource_type=resource_type,
                resource_id=str(resource_id),
            ),
            details={
                "resource_type": resource_type,
                "resource_id": str(resource_id),
            },
        )

    @classmethod
    def duplicate_identifier(cls, identifier: str) -> "ApplicationError":
        """A live user already holds this identity-provider subject."""
        message = "A user with this identifier already exists"
        return cls(
            code=ApplicationErrorCode.CONFLICT,
            message=message,
            domain_error=ConflictError(
                code=ErrorCode.USER_ALREADY_EXISTS,
                message=message,
                resource_type="User",
                conflicting_field="identifier",
            ),
            details={"field": "identifier", "identifier": identifier},
        )
