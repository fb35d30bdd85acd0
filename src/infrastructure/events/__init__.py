"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: fail-open, in-process event bus

Event Handlers:
    - LoggingEventHandler: structured logging for tenant and user events

Usage:
    >>> from src.infrastructure.events import InMemoryEventBus
    >>> from src.infrastructure.events.handlers import LoggingEventHandler
    >>>
    >>> event_bus = InMemoryEventBus(logger=logger)
    >>> LoggingEventHandler(logger=logger).register(event_bus)
"""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
