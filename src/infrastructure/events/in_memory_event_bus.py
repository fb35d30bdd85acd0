"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based handler registry.
Suitable for a single process: the unit of work publishes through it right
after a commit, inside the same request.

Usage:
    >>> @lru_cache()
    >>> def get_event_bus() -> EventBusProtocol:
    ...     return InMemoryEventBus(logger=get_logger())
    >>>
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(TenantCreated, logging_handler.handle_tenant_created)
    >>> await event_bus.publish(TenantCreated(tenant_id=uuid7(), name="Acme"))
"""

import asyncio
from collections import defaultdict

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Handlers of one event run concurrently with asyncio.gather. A failing
    handler is logged at warning level and never breaks its siblings or
    the publisher.

    Attributes:
        _handlers: Event class -> registered async handlers.
        _logger: Logger for publishing and handler failures.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register a handler for an exact event type.

        The same handler may be registered twice and will then run twice.
        """
        self._handlers[event_type].append(handler)

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        """Number of handlers registered for event_type."""
        return len(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all handlers registered for its type.

        No handlers is a no-op. Never raises.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for handler, result in zip(handlers, results, strict=True):
            if isinstance(result, Exception):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handler, "__name__", repr(handler)),
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
