"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.
Do NOT re-export from other domain subpackages (events, entities) to avoid
circular import risks.

Usage:
    from src.domain.protocols import EventBusProtocol, LoggerProtocol
    from src.domain.protocols import TenantRepository, UnitOfWork
"""

# Service protocols
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol

# Repository protocols
from src.domain.protocols.tenant_repository import TenantRepository
from src.domain.protocols.unit_of_work_protocol import UnitOfWork
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    # Repository protocols
    "TenantRepository",
    "UnitOfWork",
    "UserRepository",
]
