"""Tenant domain entity.

Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass

from src.domain.entities.base_entity import BaseEntity
from src.domain.errors import ValidationError
from src.domain.events.tenant_events import TenantCreated, TenantUpdated
from src.domain.models.tenant_models import TenantForCreation, TenantForUpdate


@dataclass(eq=False, kw_only=True)
class Tenant(BaseEntity):
    """Tenant aggregate (an organization that owns users).

    Business Rules:
        - Name is required (not empty, not whitespace-only)
        - Every change is validated before any field is replaced

    Attributes:
        name: Display name of the tenant.

    Example:
        >>> tenant = Tenant.create(TenantForCreation(name="Acme"))
        >>> [type(e).__name__ for e in tenant.domain_events]
        ['TenantCreated']
        >>> tenant.update(TenantForUpdate(name="Acme Corp")).name
        'Acme Corp'
    """

    name: str

    def __post_init__(self) -> None:
        self._validate(self.name)

    @classmethod
    def create(cls, tenant_for_creation: TenantForCreation) -> "Tenant":
        """Create a tenant and queue TenantCreated.

        Raises:
            ValidationError: If the name is blank (no instance, no event).
        """
        tenant = cls(name=tenant_for_creation.name)
        tenant.queue_domain_event(TenantCreated(tenant_id=tenant.id, name=tenant.name))
        return tenant

    def update(self, tenant_for_update: TenantForUpdate) -> "Tenant":
        """Replace the tenant's fields and queue TenantUpdated.

        Returns:
            Tenant: self, for chaining.

        Raises:
            ValidationError: If the new name is blank. The tenant is left
                unchanged and no event is queued.
        """
        self._validate(tenant_for_update.name)

        self.name = tenant_for_update.name
        self.queue_domain_event(TenantUpdated(tenant_id=self.id))
        return self

    @staticmethod
    def _validate(name: str | None) -> None:
        ValidationError.throw_when_null_or_whitespace(
            name, "Please provide a tenant name.", field="name"
        )
