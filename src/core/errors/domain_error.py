"""Base error value for Railway-Oriented Programming.

DomainError is the base class for errors that are returned (not raised)
inside Result types.

Architecture:
- Does NOT inherit from Exception (returned in Result, never raised)
- Uses dataclass inheritance (NOT Protocol/ABC)

Usage:
    from src.core.errors import DomainError
    from src.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base error value (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
