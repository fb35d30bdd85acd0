"""Event handlers for infrastructure integration.

Handlers:
    - LoggingEventHandler: structured logging of tenant and user events

All handlers are fail-open: the event bus logs a handler failure and moves on.
"""

from src.infrastructure.events.handlers.logging_event_handler import LoggingEventHandler

__all__ = [
    "LoggingEventHandler",
]
