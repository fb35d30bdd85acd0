"""Tenant creation/update inputs."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class TenantForCreation:
    """Fields for Tenant.create()."""

    name: str


@dataclass(frozen=True, kw_only=True)
class TenantForUpdate:
    """Fields for Tenant.update()."""

    name: str
