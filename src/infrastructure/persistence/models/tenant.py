"""Tenants table."""

from sqlalchemy import Column, String, Table

from src.infrastructure.persistence.base import audit_columns, metadata

TENANT_NAME_LENGTH = 200

tenants_table = Table(
    "tenants",
    metadata,
    *audit_columns(),
    Column("name", String(TENANT_NAME_LENGTH), nullable=False),
    comment="Organizations that own users",
)
