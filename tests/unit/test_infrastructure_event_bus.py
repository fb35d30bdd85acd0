"""Unit tests for InMemoryEventBus.

Tests cover:
- Subscribe/publish basic flow
- Multiple handlers for same event
- Handler failure doesn't break others (fail-open)
- No handlers registered (no-op)
- Exact-type dispatch

Architecture:
- Unit tests with mocked logger
"""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from src.domain.events import DomainEvent, TenantCreated, TenantUpdated
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus


@pytest.mark.unit
class TestInMemoryEventBusBasicFlow:
    """Test basic subscribe/publish flow."""

    @pytest.mark.asyncio
    async def test_subscribe_and_publish_single_handler(self):
        # Arrange
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event = TenantCreated(tenant_id=uuid4(), name="Acme")

        # Act
        event_bus.subscribe(TenantCreated, handler)
        await event_bus.publish(event)

        # Assert
        assert received == [event]

    @pytest.mark.asyncio
    async def test_all_handlers_run(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        calls: list[str] = []

        async def handler_1(event: DomainEvent) -> None:
            calls.append("handler_1")

        async def handler_2(event: DomainEvent) -> None:
            calls.append("handler_2")

        event_bus.subscribe(TenantCreated, handler_1)
        event_bus.subscribe(TenantCreated, handler_2)
        await event_bus.publish(TenantCreated(tenant_id=uuid4(), name="Acme"))

        assert sorted(calls) == ["handler_1", "handler_2"]
        assert event_bus.handler_count(TenantCreated) == 2

    @pytest.mark.asyncio
    async def test_publish_without_handlers_is_noop(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        await event_bus.publish(TenantUpdated(tenant_id=uuid4()))

        mock_logger.debug.assert_not_called()
        assert event_bus.handler_count(TenantUpdated) == 0

    @pytest.mark.asyncio
    async def test_dispatch_is_by_exact_type(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event_bus.subscribe(TenantCreated, handler)
        await event_bus.publish(TenantUpdated(tenant_id=uuid4()))

        assert received == []


@pytest.mark.unit
class TestInMemoryEventBusFailOpen:
    """Test that failing handlers never propagate."""

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self):
        # Arrange
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        calls: list[str] = []

        async def failing_handler(event: DomainEvent) -> None:
            raise RuntimeError("boom")

        async def healthy_handler(event: DomainEvent) -> None:
            calls.append("healthy")

        event_bus.subscribe(TenantCreated, failing_handler)
        event_bus.subscribe(TenantCreated, healthy_handler)

        # Act
        await event_bus.publish(TenantCreated(tenant_id=uuid4(), name="Acme"))

        # Assert
        assert calls == ["healthy"]
        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args[0] == "event_handler_failed"
        assert kwargs["handler_name"] == "failing_handler"
        assert kwargs["error_type"] == "RuntimeError"
        assert kwargs["error_message"] == "boom"
        assert kwargs["event_type"] == "TenantCreated"
