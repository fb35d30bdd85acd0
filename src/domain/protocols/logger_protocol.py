"""LoggerProtocol definition for structured logging.

Backend-agnostic port for key-value logging. Domain and application code
depend on this protocol; the structlog adapter lives in infrastructure.

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("tenant_added", tenant_id=str(tenant.id))

    scoped = logger.bind(trace_id=trace_id)
    scoped.warning("validation_failed", field="name")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Every call is an event name plus key-value context. bind() and
    with_context() return a new logger; the original is left untouched.
    """

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message.

        Args:
            message: Event name.
            error: Optional exception; adapters add error_type and
                error_message fields for it.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with context included in every call."""
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
