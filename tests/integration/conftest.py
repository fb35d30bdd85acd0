"""Integration test fixtures.

Every test gets its own in-memory SQLite database with the schema created,
so tests never see each other's rows.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from src.domain.events import DomainEvent
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus
from src.infrastructure.persistence import Database, SqlAlchemyUnitOfWork


@pytest_asyncio.fixture
async def test_database() -> AsyncGenerator[Database, None]:
    """Fresh in-memory database with all tables."""
    database = Database("sqlite+aiosqlite://")
    await database.create_all()
    yield database
    await database.close()


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus(logger=MagicMock())


@pytest.fixture
def published(event_bus) -> list[DomainEvent]:
    """Every event dispatched through the bus, in publication order."""
    received: list[DomainEvent] = []

    async def record(event: DomainEvent) -> None:
        received.append(event)

    for event_type in _all_event_types():
        event_bus.subscribe(event_type, record)
    return received


@pytest.fixture
def unit_of_work(test_database, event_bus):
    """Factory opening a unit of work on its own session.

    Usage:
        async with unit_of_work(current_user="auth0|admin") as uow:
            uow.tenants.add(tenant)
            await uow.commit()
    """

    @asynccontextmanager
    async def open_unit_of_work(
        current_user: str | None = "auth0|admin",
    ) -> AsyncGenerator[SqlAlchemyUnitOfWork, None]:
        async with test_database.get_session() as session:
            yield SqlAlchemyUnitOfWork(
                session=session,
                event_bus=event_bus,
                logger=MagicMock(),
                current_user=current_user,
            )

    return open_unit_of_work


def _all_event_types(cls: type[DomainEvent] = DomainEvent) -> list[type[DomainEvent]]:
    event_types = []
    for subclass in cls.__subclasses__():
        event_types.append(subclass)
        event_types.extend(_all_event_types(subclass))
    return event_types
