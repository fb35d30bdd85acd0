"""Event bus protocol (port) for domain events.

The domain defines the port, infrastructure provides the adapter
(InMemoryEventBus). The unit of work publishes drained events through it
after every successful commit.

Usage:
    >>> from src.core.container import get_event_bus
    >>> from src.domain.events import TenantCreated
    >>>
    >>> event_bus = get_event_bus()
    >>>
    >>> async def on_tenant_created(event: TenantCreated) -> None:
    ...     print(event.name)
    >>>
    >>> event_bus.subscribe(TenantCreated, on_tenant_created)
    >>> await event_bus.publish(TenantCreated(tenant_id=uuid7(), name="Acme"))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

# Async side-effect handler for a single event
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open**: one handler failure must not prevent the others
           from running, and is never propagated to the publisher.
        2. **Exact type routing**: handlers registered for an event class
           receive only instances of that class (no subclass matching).
        3. **No handler ordering**: handlers of one event run concurrently.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register a handler for an event type.

        Args:
            event_type: Event class to handle.
            handler: Async callable taking the event and returning None.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to every handler registered for type(event).

        Args:
            event: Domain event instance.
        """
        ...
