"""Mapper registry, metadata and shared columns for all tables.

Domain entities stay plain dataclasses: they are mapped imperatively onto
the tables in ``models/`` (see mapping.start_mappers), so no entity
inherits from an ORM base class.

Architecture:
    audit_columns() (id + audit columns + is_deleted)
        ├── tenants
        ├── users
        └── user_permissions

Note: The tables stay database-agnostic by using SQLAlchemy's Uuid type
and a UTC-normalizing datetime type, so the same schema runs on SQLite
(tests) and PostgreSQL.
"""

from sqlalchemy import Boolean, Column, String, Uuid
from sqlalchemy.orm import registry

from src.infrastructure.persistence.types import UtcDateTime

mapper_registry = registry()
metadata = mapper_registry.metadata

# Length of created_by / last_modified_by (an identity-provider subject)
ACTOR_LENGTH = 255


def audit_columns() -> list[Column]:
    """Columns every table carries.

    Returns fresh Column objects on each call (a Column belongs to exactly
    one Table).

    Columns:
        id: UUID primary key, generated by the domain (UUIDv7).
        created_on: UTC creation time, stamped on flush.
        created_by: Acting user identifier at creation.
        last_modified_on: UTC time of the last flush that changed the row.
        last_modified_by: Acting user identifier at last change.
        is_deleted: Soft-delete flag. Deleted rows stay in the table.
    """
    return [
        Column("id", Uuid, primary_key=True),
        Column("created_on", UtcDateTime, nullable=True),
        Column("created_by", String(ACTOR_LENGTH), nullable=True),
        Column("last_modified_on", UtcDateTime, nullable=True),
        Column("last_modified_by", String(ACTOR_LENGTH), nullable=True),
        Column("is_deleted", Boolean, nullable=False, default=False, index=True),
    ]
