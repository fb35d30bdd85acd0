"""Imperative mapping of domain entities onto the tables.

The domain layer never imports SQLAlchemy. Its dataclasses are
instrumented here, once per process, so the session can track them
directly: repositories return the domain entities themselves and the
unit of work finds their pending events in the session's identity map.
"""

from typing import Any

from sqlalchemy import event
from sqlalchemy.orm import relationship

from src.domain.entities.base_entity import BaseEntity
from src.domain.entities.tenant import Tenant
from src.domain.entities.user import User
from src.domain.entities.user_permission import UserPermission
from src.infrastructure.persistence.base import mapper_registry
from src.infrastructure.persistence.models import (
    tenants_table,
    user_permissions_table,
    users_table,
)


def start_mappers() -> None:
    """Map Tenant, User and UserPermission. Safe to call more than once."""
    if mapper_registry.mappers:
        return

    mapper_registry.map_imperatively(Tenant, tenants_table)
    mapper_registry.map_imperatively(UserPermission, user_permissions_table)
    mapper_registry.map_imperatively(
        User,
        users_table,
        properties={
            # Grants are always needed with their user; async sessions
            # cannot lazy-load on attribute access.
            "_permissions": relationship(
                UserPermission,
                cascade="all, delete-orphan",
                lazy="selectin",
                order_by=user_permissions_table.c.id,
            ),
        },
    )

    for entity_class in (Tenant, User, UserPermission):
        event.listen(entity_class, "load", _start_event_queue)


def _start_event_queue(target: BaseEntity, context: Any) -> None:
    """Loaded entities skip __init__, so they get an empty event queue here."""
    target._domain_events = []
