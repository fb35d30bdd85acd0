"""SQLAlchemy unit of work.

One unit of work per request, wrapping one AsyncSession. Repositories
stage changes on the session; commit() writes them in one transaction and
then dispatches the domain events the aggregates queued.

Commit cycle:
    1. Flush: the session stamps audit metadata and turns removals into
       soft deletes (see auditing.stamp_audit_fields)
    2. Collect every entity in the session's identity map
    3. Commit the transaction
    4. Snapshot the collected entities' pending events, clear them, and
       publish them through the event bus, oldest first

Tenant scope:
    The acting user (X-User-Identifier) is resolved to their tenant once
    per unit of work. User lookups are then restricted to that tenant. No
    acting user, an unknown identifier or a user without a tenant means
    no restriction.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.base_entity import BaseEntity
from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.persistence.auditing import CURRENT_USER_KEY
from src.infrastructure.persistence.models import users_table
from src.infrastructure.persistence.repositories import (
    TenantRepository,
    UserRepository,
)


class SqlAlchemyUnitOfWork:
    """Unit of work over one database session.

    Attributes:
        tenants: Tenant repository bound to this unit of work.
        users: User repository bound to this unit of work (tenant scoped).

    Example:
        >>> async with database.get_session() as session:
        ...     uow = SqlAlchemyUnitOfWork(session=session, event_bus=bus, logger=logger)
        ...     tenant = Tenant.create(TenantForCreation(name="Acme"))
        ...     uow.tenants.add(tenant)
        ...     await uow.commit()  # stamps, stores, publishes TenantCreated
        >>> tenant.domain_events
        ()
    """

    def __init__(
        self,
        session: AsyncSession,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        current_user: str | None = None,
    ) -> None:
        """Initialize unit of work.

        Args:
            session: Session owned by this unit of work.
            event_bus: Bus that receives drained domain events.
            logger: Logger for commit summaries.
            current_user: Identifier of the acting user, stamped into
                created_by / last_modified_by and used to resolve the
                tenant scope. None for anonymous calls.
        """
        self._session = session
        self._event_bus = event_bus
        self._logger = logger
        self._current_user = current_user
        self._session.info[CURRENT_USER_KEY] = current_user

        self._tenant_id: UUID | None = None
        self._tenant_resolved = False

        self.tenants = TenantRepository(session)
        self.users = UserRepository(session, tenant_id_provider=self.current_tenant_id)

    async def current_tenant_id(self) -> UUID | None:
        """Tenant of the acting user, or None when lookups are unrestricted.

        The lookup itself ignores the tenant scope and is done once per
        unit of work.
        """
        if self._current_user is None:
            return None

        if not self._tenant_resolved:
            self._tenant_id = await self._session.scalar(
                select(users_table.c.tenant_id).where(
                    users_table.c.identifier == self._current_user,
                    users_table.c.is_deleted.is_(False),
                )
            )
            self._tenant_resolved = True
        return self._tenant_id

    async def commit(self) -> None:
        """Persist staged changes, then publish queued events.

        Events are published only after the transaction commits. A failing
        event handler never fails the commit (the bus is fail-open).
        """
        await self._session.flush()
        entities = [
            entity
            for entity in self._session.identity_map.values()
            if isinstance(entity, BaseEntity)
        ]
        await self._session.commit()

        events = self._drain_events(entities)

        self._logger.info(
            "unit_of_work_committed",
            entity_count=len(entities),
            event_count=len(events),
            current_user=self._current_user,
        )

        for event in events:
            await self._event_bus.publish(event)

    async def rollback(self) -> None:
        """Discard staged changes and the events queued with them.

        Nothing reaches storage before commit().
        """
        for entity in [*self._session.identity_map.values(), *self._session.new]:
            if isinstance(entity, BaseEntity):
                entity.clear_domain_events()
        await self._session.rollback()
        self._logger.debug(
            "unit_of_work_rolled_back", current_user=self._current_user
        )

    @staticmethod
    def _drain_events(entities: list[BaseEntity]) -> list[DomainEvent]:
        """Snapshot and clear pending events, ordered by occurrence.

        Ties on occurred_at fall back to the time-ordered event_id.
        """
        events: list[DomainEvent] = []
        for entity in entities:
            events.extend(entity.domain_events)
            entity.clear_domain_events()
        return sorted(events, key=lambda event: (event.occurred_at, event.event_id))
