"""Base domain event class.

Domain events record "things that happened" to an aggregate and are named
in past tense (TenantCreated, UserRoleUpdated). Entities queue them; the
persistence layer drains and publishes them after a successful commit.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUIDv7, time-ordered) for event tracking
    - occurred_at timestamp (UTC) for event ordering

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    ... class TenantUpdated(DomainEvent):
    ...     tenant_id: UUID
    >>>
    >>> event = TenantUpdated(tenant_id=tenant.id)
    >>> event.event_id, event.occurred_at  # auto-generated
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (TenantCreated, NOT CreateTenant)
        3. Be frozen dataclasses with kw_only=True
        4. Carry immutable data only (ids, strings), never a live entity

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUIDv7 if not provided; used for deduplication and correlation.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Event class name, used as the log/event-type key."""
        return type(self).__name__
