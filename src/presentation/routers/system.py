"""System router for non-versioned application endpoints.

Provides external-facing system endpoints that are not part of the
versioned API contract: root, health, liveness and configuration.

These endpoints are lightweight and side-effect free.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Application name, status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Readiness check: the database must be reachable.

    Returns:
        JSONResponse: 200 when healthy, 503 otherwise.
    """
    if await get_database().check_connection():
        return JSONResponse(content={"status": "healthy"})
    return JSONResponse(status_code=503, content={"status": "unhealthy"})


@system_router.get("/alive")
async def alive() -> dict[str, str]:
    """Liveness check: the process answers requests."""
    return {"status": "alive"}


@system_router.get("/config")
async def get_config() -> JSONResponse:
    """Configuration debug endpoint (development only).

    Returns:
        JSONResponse: Configuration details or 403 in non-development
            environments.
    """
    if not settings.is_development:
        return JSONResponse(
            status_code=403,
            content={"detail": "Config endpoint only available in development"},
        )

    return JSONResponse(
        content={
            "environment": settings.environment.value,
            "debug": settings.debug,
            "api": {
                "name": settings.app_name,
                "version": settings.app_version,
                "base_url": settings.api_base_url,
                "v1_prefix": settings.api_v1_prefix,
            },
            "logging": {
                "level": settings.log_level,
                "json": settings.use_json_logs,
            },
            "pagination": {
                "default_page_size": settings.default_page_size,
                "max_page_size": settings.max_page_size,
            },
        }
    )
