"""Role and permission catalog queries."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ListRoles:
    """Fetch every assignable role with its default permissions."""


@dataclass(frozen=True, kw_only=True)
class ListPermissions:
    """Fetch every grantable permission."""
