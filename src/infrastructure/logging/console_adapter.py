"""Console logging adapter.

Writes structured logs to stdout with structlog:
- Development: colored, human-readable key-value lines
- Testing/CI/production: one JSON object per line

Context bound with structlog.contextvars (the request trace id) is merged
into every line.

Does NOT inherit from LoggerProtocol; any object with the same call
signatures satisfies the protocol.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


class ConsoleAdapter:
    """Console logger backed by structlog.

    Args:
        use_json: JSON output when True, console renderer when False.
        level: Minimum level name ("DEBUG", "INFO", ...).
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error, flattening error into error_type/error_message."""
        self._logger.error(message, **self._with_error(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **self._with_error(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter with context bound to every call."""
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter

    def with_context(self, **context: Any) -> ConsoleAdapter:
        return self.bind(**context)

    @staticmethod
    def _with_error(
        error: Exception | None, context: dict[str, Any]
    ) -> dict[str, Any]:
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        return context
