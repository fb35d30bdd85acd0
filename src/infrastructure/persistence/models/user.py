"""Users and user-permissions tables.

A user's permission grants live in their own table and are always loaded
and written together with the user.

Identifiers are unique among live users only: soft-deleted users free
their identifier. users.tenant_id is deliberately not a foreign key;
the owning tenant is checked by the application when a user is added.
"""

from sqlalchemy import Column, ForeignKey, Index, String, Table, Uuid

from src.infrastructure.persistence.base import audit_columns, metadata
from src.infrastructure.persistence.types import (
    EmailAddressType,
    PermissionType,
    UserRoleType,
)

users_table = Table(
    "users",
    metadata,
    *audit_columns(),
    Column(
        "tenant_id",
        Uuid,
        nullable=True,
        index=True,
        comment="Owning tenant (NULL for users without a tenant)",
    ),
    Column("first_name", String(200), nullable=False),
    Column("last_name", String(200), nullable=False),
    Column(
        "identifier",
        String(255),
        nullable=False,
        comment="Identity-provider subject",
    ),
    Column("email", EmailAddressType, nullable=True),
    Column("username", String(100), nullable=False),
    Column("role", UserRoleType, nullable=False),
    comment="Users, optionally owned by a tenant",
)

Index(
    "uq_users_identifier_live",
    users_table.c.identifier,
    unique=True,
    sqlite_where=users_table.c.is_deleted.is_(False),
    postgresql_where=users_table.c.is_deleted.is_(False),
)

user_permissions_table = Table(
    "user_permissions",
    metadata,
    *audit_columns(),
    Column(
        "user_id",
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("permission", PermissionType, nullable=False),
    comment="Permissions granted to users",
)
