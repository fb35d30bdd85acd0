"""
Main FastAPI application entry point.

Builds the FastAPI application: trace middleware, RFC 9457 exception
handlers, system endpoints and the versioned API.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_database, get_event_bus, get_logger
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup creates the schema and builds the event bus (and its
    subscriptions) eagerly so the first request does not pay for it.
    Shutdown closes the database connections.
    """
    logger = get_logger()
    database = get_database()
    await database.create_all()
    get_event_bus()
    logger.info(
        "application_started",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
    )

    yield

    await database.close()
    logger.info("application_stopped", app_name=settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant tenant and user management API",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
