"""Column types for domain values.

Value objects are stored as their canonical strings and rebuilt on load.
Stored values were validated when they were written, so loading skips
validation.
"""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import DateTime, Dialect, String
from sqlalchemy.types import TypeDecorator

from src.domain.enums import PermissionName, RoleName
from src.domain.value_objects.email_address import EmailAddress
from src.domain.value_objects.permission import Permission
from src.domain.value_objects.user_role import UserRole


class UtcDateTime(TypeDecorator[datetime]):
    """Timezone-aware UTC datetime on every backend.

    SQLite has no timezone support: values are written as naive UTC and
    tagged with UTC again when read.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
            if dialect.name == "sqlite":
                value = value.replace(tzinfo=None)
        return value

    def process_result_value(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class EmailAddressType(TypeDecorator[EmailAddress]):
    """EmailAddress stored as its raw string (NULL when absent)."""

    impl = String(320)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if isinstance(value, EmailAddress):
            return value.as_str()
        return value

    def process_result_value(
        self, value: str | None, dialect: Dialect
    ) -> EmailAddress:
        return EmailAddress._unvalidated(value)


class UserRoleType(TypeDecorator[UserRole]):
    """UserRole stored as its canonical name ("Admin", "User")."""

    impl = String(50)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if isinstance(value, UserRole):
            return value.value
        return value

    def process_result_value(
        self, value: str | None, dialect: Dialect
    ) -> UserRole | None:
        if value is None:
            return None
        return UserRole(RoleName(value))


class PermissionType(TypeDecorator[Permission]):
    """Permission stored as its canonical name ("do_something_special")."""

    impl = String(100)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if isinstance(value, Permission):
            return value.value
        return value

    def process_result_value(
        self, value: str | None, dialect: Dialect
    ) -> Permission | None:
        if value is None:
            return None
        return Permission(PermissionName(value))
