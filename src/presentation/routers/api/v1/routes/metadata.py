"""Route metadata types for the API Route Registry.

The registry is the single source of truth for all versioned API routes.
Each entry describes one endpoint; the generator turns entries into
FastAPI routes with their OpenAPI metadata.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, docs)
    HTTPMethod: HTTP method enum (GET, POST, PUT, DELETE)
    ErrorSpec: Error response specification for OpenAPI
    IdempotencyLevel: HTTP idempotency classification

Usage:
    from src.presentation.routers.api.v1.routes.metadata import RouteMetadata, HTTPMethod

    metadata = RouteMetadata(
        method=HTTPMethod.POST,
        path="/tenants",
        handler=create_tenant,
        resource="tenants",
        tags=["Tenants"],
        summary="Create tenant",
        response_model=TenantDto,
        status_code=201,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification.

    Attributes:
        SAFE: No side effects (GET)
        IDEMPOTENT: Side effects, but repeatable (PUT, DELETE)
        NON_IDEMPOTENT: Side effects, not repeatable (POST)
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 400, 404, 409)
        description: Human-readable error description
        model: Pydantic model for the response (defaults to ProblemDetails)

    Examples:
        >>> ErrorSpec(status=404, description="Tenant not found")
        >>> ErrorSpec(status=409, description="Identifier already in use")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route.

    Identity fields:
        method: HTTP method
        path: URL path relative to the version prefix (e.g., "/tenants/{tenant_id}")
        handler: Async function that implements the endpoint

    Grouping fields:
        resource: Resource category (e.g., "tenants", "users")
        tags: OpenAPI tags

    OpenAPI documentation:
        summary: Short endpoint description
        description: Detailed endpoint description
        operation_id: Stable operation ID for client generation

    Request/Response:
        response_model: Pydantic model for success response
        status_code: Expected success status (200, 201, 204)
        errors: Possible error responses

    Behavior:
        idempotency: HTTP idempotency level
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]
    version: str = "v1"

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: Any = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel

    deprecated: bool = False
