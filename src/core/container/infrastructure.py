"""Infrastructure dependency factories.

Application-scoped singletons (logger, database) and the request-scoped
unit of work.

Architecture:
    - Application-scoped: @lru_cache() decorated functions (singletons)
    - Request-scoped: generator dependencies resolved per request by FastAPI
"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Header

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.infrastructure.persistence.database import Database
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    LOG_JSON overrides the environment default.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_database() -> "Database":
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool. The application
    lifespan creates the schema on startup and closes the engine on
    shutdown.

    Note:
        The default DATABASE_URL is an in-memory SQLite database, which
        lives as long as the engine. Tests call get_database.cache_clear()
        to start from an empty one.
    """
    from src.infrastructure.persistence.database import Database

    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_unit_of_work(
    x_user_identifier: str | None = Header(default=None),
) -> AsyncGenerator["SqlAlchemyUnitOfWork", None]:
    """Get a fresh unit of work (request-scoped).

    Opens one session for the request and closes it afterwards; anything
    the handler did not commit is discarded.

    Args:
        x_user_identifier: Acting user's identifier from the
            X-User-Identifier header, stamped into audit fields and used to
            scope user lookups to the acting user's tenant.
            Injected by FastAPI; None for anonymous requests.

    Usage:
        @router.post("/tenants")
        async def add_tenant(uow: UnitOfWork = Depends(get_unit_of_work)):
            ...
    """
    from src.core.container.events import get_event_bus
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    async with get_database().get_session() as session:
        yield SqlAlchemyUnitOfWork(
            session=session,
            event_bus=get_event_bus(),
            logger=get_logger(),
            current_user=x_user_identifier,
        )
