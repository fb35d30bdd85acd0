"""Route generator for the API Route Registry.

Converts RouteMetadata entries into FastAPI routes at application startup.

Functions:
    register_routes_from_registry: Generate all routes from registry
    _build_responses: Build OpenAPI responses dict from error specs

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    v1_router = APIRouter(prefix=settings.api_v1_prefix)
    register_routes_from_registry(v1_router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter

from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.presentation.routers.api.v1.routes.metadata import ErrorSpec, RouteMetadata


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Routes are added in registry order, which is also FastAPI's matching
    order: literal paths must be listed before parameterized siblings.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: List of RouteMetadata entries to convert into routes
    """
    for metadata in registry:
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            deprecated=metadata.deprecated,
        )


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error specifications.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="User not found")])
        {404: {"description": "User not found", "model": ProblemDetails}}
    """
    return {
        error.status: {
            "description": error.description,
            "model": error.model or ProblemDetails,
        }
        for error in errors
    }
