"""Base class for aggregates and child entities.

Provides identity, audit metadata, the soft-delete flag and the pending
domain-event queue.

Ownership rules:
    - Domain code only ever calls queue_domain_event().
    - Audit metadata, is_deleted, override_id() and clear_domain_events()
      belong to the persistence layer, which stamps them on flush.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.events.base_event import DomainEvent


@dataclass(eq=False, kw_only=True)
class BaseEntity:
    """Identity, audit metadata and pending domain events.

    Attributes:
        id: Unique identifier (UUIDv7, generated on construction).
        created_on: When the entity was first persisted (None until then).
        created_by: Identifier of the acting user at creation.
        last_modified_on: When the entity was last persisted.
        last_modified_by: Identifier of the acting user at last change.
        is_deleted: Soft-delete flag.
    """

    id: UUID = field(default_factory=uuid7)
    created_on: datetime | None = None
    created_by: str | None = None
    last_modified_on: datetime | None = None
    last_modified_by: str | None = None
    is_deleted: bool = False

    _domain_events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False
    )

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Pending events, oldest first (read-only view)."""
        return tuple(self._domain_events)

    def queue_domain_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def clear_domain_events(self) -> None:
        """Drop pending events. Called by persistence after publication."""
        self._domain_events.clear()

    def update_creation_properties(
        self, created_on: datetime, created_by: str | None
    ) -> None:
        self.created_on = created_on
        self.created_by = created_by

    def update_modified_properties(
        self, last_modified_on: datetime | None, last_modified_by: str | None
    ) -> None:
        self.last_modified_on = last_modified_on
        self.last_modified_by = last_modified_by

    def update_is_deleted(self, is_deleted: bool) -> None:
        self.is_deleted = is_deleted

    def override_id(self, entity_id: UUID) -> None:
        self.id = entity_id
