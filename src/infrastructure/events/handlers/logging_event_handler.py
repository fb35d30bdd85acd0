"""Logging event handler for domain events.

Logs every tenant and user event at INFO level with structured fields.

Structured Fields:
    - event_id: UUID for correlation and deduplication
    - occurred_at: ISO 8601 timestamp (UTC)
    - tenant_id / user_id: identity of the aggregate
    - role / permission: the changed value, for role and permission events

Usage:
    >>> handler = LoggingEventHandler(logger=get_logger())
    >>> handler.register(get_event_bus())
"""

from src.domain.events.tenant_events import TenantCreated, TenantUpdated
from src.domain.events.user_events import (
    UserCreated,
    UserPermissionAdded,
    UserPermissionRemoved,
    UserRoleUpdated,
    UserUpdated,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger())
        >>> event_bus.subscribe(TenantCreated, handler.handle_tenant_created)
        >>> await event_bus.publish(TenantCreated(tenant_id=uuid7(), name="Acme"))
        >>> # Log output: {"event": "tenant_created", "tenant_id": "...", "name": "Acme"}
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def register(self, event_bus: EventBusProtocol) -> None:
        """Subscribe every handler method to its event type."""
        event_bus.subscribe(TenantCreated, self.handle_tenant_created)
        event_bus.subscribe(TenantUpdated, self.handle_tenant_updated)
        event_bus.subscribe(UserCreated, self.handle_user_created)
        event_bus.subscribe(UserUpdated, self.handle_user_updated)
        event_bus.subscribe(UserRoleUpdated, self.handle_user_role_updated)
        event_bus.subscribe(UserPermissionAdded, self.handle_user_permission_added)
        event_bus.subscribe(
            UserPermissionRemoved, self.handle_user_permission_removed
        )

    # =========================================================================
    # Tenant Event Handlers
    # =========================================================================

    async def handle_tenant_created(self, event: TenantCreated) -> None:
        self._logger.info(
            "tenant_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            tenant_id=str(event.tenant_id),
            name=event.name,
        )

    async def handle_tenant_updated(self, event: TenantUpdated) -> None:
        self._logger.info(
            "tenant_updated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            tenant_id=str(event.tenant_id),
        )

    # =========================================================================
    # User Event Handlers
    # =========================================================================

    async def handle_user_created(self, event: UserCreated) -> None:
        """Log user creation.

        The email is deliberately left out of the log line; identifier and
        role are enough to correlate with the identity provider.
        """
        self._logger.info(
            "user_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            tenant_id=str(event.tenant_id) if event.tenant_id else None,
            identifier=event.identifier,
            role=event.role,
        )

    async def handle_user_updated(self, event: UserUpdated) -> None:
        self._logger.info(
            "user_updated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
        )

    async def handle_user_role_updated(self, event: UserRoleUpdated) -> None:
        self._logger.info(
            "user_role_updated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            role=event.role,
        )

    async def handle_user_permission_added(
        self,
        event: UserPermissionAdded,
    ) -> None:
        self._logger.info(
            "user_permission_added",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            permission=event.permission,
        )

    async def handle_user_permission_removed(
        self,
        event: UserPermissionRemoved,
    ) -> None:
        self._logger.info(
            "user_permission_removed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            permission=event.permission,
        )
