"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_ROLE = "invalid_role"
    INVALID_PERMISSION = "invalid_permission"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    TENANT_NOT_FOUND = "tenant_not_found"
    USER_NOT_FOUND = "user_not_found"

    # Conflict errors
    USER_ALREADY_EXISTS = "user_already_exists"
