"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_event_bus, get_add_tenant_handler

The container is organized into modules:
- infrastructure: logger, database, request-scoped unit of work
- events: event bus and subscriptions
- access_handlers: role and permission catalog handler factories
- tenant_handlers: tenant handler factories
- user_handlers: user handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_logger,
    get_unit_of_work,
)

# Event bus
from src.core.container.events import get_event_bus

# Role and permission catalog
from src.core.container.access_handlers import (
    get_list_permissions_handler,
    get_list_roles_handler,
)

# Tenant handlers
from src.core.container.tenant_handlers import (
    get_add_tenant_handler,
    get_delete_tenant_handler,
    get_get_tenant_handler,
    get_list_tenants_handler,
    get_update_tenant_handler,
)

# User handlers
from src.core.container.user_handlers import (
    get_add_user_handler,
    get_add_user_permission_handler,
    get_delete_user_handler,
    get_get_user_by_identifier_handler,
    get_get_user_handler,
    get_initiate_user_and_tenant_handler,
    get_list_users_handler,
    get_remove_user_permission_handler,
    get_sync_user_from_idp_handler,
    get_update_user_handler,
    get_update_user_role_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_logger",
    "get_unit_of_work",
    # Events
    "get_event_bus",
    # Catalog handlers
    "get_list_permissions_handler",
    "get_list_roles_handler",
    # Tenant handlers
    "get_add_tenant_handler",
    "get_delete_tenant_handler",
    "get_get_tenant_handler",
    "get_list_tenants_handler",
    "get_update_tenant_handler",
    # User handlers
    "get_add_user_handler",
    "get_add_user_permission_handler",
    "get_delete_user_handler",
    "get_get_user_by_identifier_handler",
    "get_get_user_handler",
    "get_initiate_user_and_tenant_handler",
    "get_list_users_handler",
    "get_remove_user_permission_handler",
    "get_sync_user_from_idp_handler",
    "get_update_user_handler",
    "get_update_user_role_handler",
]
