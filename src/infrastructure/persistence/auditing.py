"""Audit stamping and soft delete, applied on every flush.

Every session created by Database is an AuditingSession. Before each
flush the session's pending changes are stamped with the current UTC time
and the acting user stored in ``session.info["current_user"]``:

    session.new     -> creation + modified
    session.dirty   -> modified (only when a value actually changed)
    session.deleted -> modified + is_deleted, and the entity is put back
                       into the session, so the flush writes an UPDATE
                       instead of a DELETE (soft delete)
"""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import event
from sqlalchemy.orm import Session

from src.domain.entities.base_entity import BaseEntity

CURRENT_USER_KEY = "current_user"


class AuditingSession(Session):
    """Sync session class behind every AsyncSession handed out by Database."""


@event.listens_for(AuditingSession, "before_flush")
def stamp_audit_fields(session: Session, flush_context: Any, instances: Any) -> None:
    now = datetime.now(UTC)
    current_user: str | None = session.info.get(CURRENT_USER_KEY)

    soft_deleted: set[BaseEntity] = set()
    for entity in session.deleted:
        if not isinstance(entity, BaseEntity):
            continue
        entity.update_modified_properties(now, current_user)
        entity.update_is_deleted(True)
        soft_deleted.add(entity)
    for entity in soft_deleted:
        session.add(entity)

    for entity in session.new:
        if isinstance(entity, BaseEntity):
            entity.update_creation_properties(now, current_user)
            entity.update_modified_properties(now, current_user)

    for entity in session.dirty:
        if (
            isinstance(entity, BaseEntity)
            and entity not in soft_deleted
            and session.is_modified(entity)
        ):
            entity.update_modified_properties(now, current_user)
