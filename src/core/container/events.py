"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscriptions
are wired once, when the bus is first requested.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Subscriptions:
        - LoggingEventHandler: every tenant and user event

    Usage:
        # Infrastructure (unit of work)
        await get_event_bus().publish(event)

        # Tests: subscribe extra handlers to observe dispatch
        get_event_bus().subscribe(TenantCreated, handler)
    """
    from src.core.container.infrastructure import get_logger
    from src.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    event_bus = InMemoryEventBus(logger=get_logger())
    LoggingEventHandler(logger=get_logger()).register(event_bus)
    return event_bus
