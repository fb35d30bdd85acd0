"""Domain errors.

Usage:
    from src.domain.errors import ValidationError
"""

from src.domain.errors.validation_error import ValidationError

__all__ = ["ValidationError"]
