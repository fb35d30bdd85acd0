"""Domain validation exception.

Raised synchronously by value objects and entities when an invariant is
violated. The domain never catches, logs or retries it: the application
layer converts it into an ApplicationError at the command boundary.

Guard helpers mirror the checks entities run before committing state:

    ValidationError.throw_when_null_or_whitespace(name, "Please provide a tenant name.", field="name")
"""

from typing import Any


class ValidationError(ValueError):
    """Domain invariant violation.

    Attributes:
        field: Name of the offending field ("" when not tied to one field).
        message: Caller-facing, human-readable explanation.
    """

    def __init__(self, message: str, *, field: str = "") -> None:
        super().__init__(message)
        self.field = field
        self.message = message

    def __repr__(self) -> str:
        return f"ValidationError(field={self.field!r}, message={self.message!r})"

    @classmethod
    def throw_when_null(cls, value: Any, message: str, *, field: str = "") -> None:
        """Raise when value is None."""
        if value is None:
            raise cls(message, field=field)

    @classmethod
    def throw_when_null_or_whitespace(
        cls, value: str | None, message: str, *, field: str = ""
    ) -> None:
        """Raise when value is None, empty, or whitespace-only."""
        if value is None or not value.strip():
            raise cls(message, field=field)

    @classmethod
    def must(cls, condition: bool, message: str, *, field: str = "") -> None:
        """Raise unless condition holds."""
        if not condition:
            raise cls(message, field=field)

    @classmethod
    def must_not(cls, condition: bool, message: str, *, field: str = "") -> None:
        """Raise when condition holds."""
        if condition:
            raise cls(message, field=field)
