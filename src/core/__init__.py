"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for application-level failures
- Settings and the dependency container

The core module has NO dependencies on the presentation layer.
"""

from src.core.errors import ConflictError, DomainError, NotFoundError
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
]
