"""Result types for railway-oriented programming.

Application handlers return a Result instead of raising, so the presentation
layer decides how every failure is rendered.

Usage:
    async def handle(cmd: AddTenant) -> Result[TenantDto, ApplicationError]:
        ...
        return Success(value=to_tenant_dto(tenant))

    match await handler.handle(cmd):
        case Success(value=dto):
            return dto
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, ...)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result = Success[T] | Failure[E]
