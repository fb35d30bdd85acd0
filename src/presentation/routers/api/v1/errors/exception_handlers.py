"""Global exception handlers for FastAPI application.

Converts exceptions that escape the route functions into RFC 9457
Problem Details responses.

Handlers:
    http_exception_handler: HTTPException (404 for unknown routes, etc.)
    validation_exception_handler: RequestValidationError (malformed bodies, bad query params)
    domain_validation_exception_handler: domain ValidationError that escaped a handler
    generic_exception_handler: anything else (500, logged)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from typing import cast

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from src.core.config import settings
from src.core.container import get_logger
from src.domain.errors import ValidationError
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# HTTP status code -> (title, slug) for the RFC 9457 type URL
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
}


def _status_info(status_code: int) -> tuple[str, str]:
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    title, slug = _status_info(status_code)
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
        errors=errors,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to RFC 9457 Problem Details response."""
    http_exc = cast(HTTPException, exc)

    return _problem_response(
        request,
        http_exc.status_code,
        http_exc.detail if isinstance(http_exc.detail, str) else str(http_exc.detail),
        headers=getattr(http_exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to RFC 9457 with field-level errors.

    Example:
        >>> # GET /api/v1/tenants?page_number=0
        >>> # {
        >>> #   "title": "Validation Failed",
        >>> #   "status": 422,
        >>> #   "errors": [{"field": "query.page_number", "code": "greater_than_equal", ...}]
        >>> # }
    """
    validation_exc = cast(RequestValidationError, exc)

    field_errors: list[ErrorDetail] = []
    for error in validation_exc.errors():
        # ["body", "name"] -> "name"
        field_parts = [str(p) for p in error.get("loc", []) if p != "body"]
        field_errors.append(
            ErrorDetail(
                field=".".join(field_parts) if field_parts else "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    return _problem_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Request validation failed. Check 'errors' for details.",
        errors=field_errors or None,
    )


async def domain_validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Render a domain ValidationError that no handler converted as 400."""
    domain_exc = cast(ValidationError, exc)

    errors = None
    if domain_exc.field:
        errors = [
            ErrorDetail(
                field=domain_exc.field,
                code="validation_failed",
                message=domain_exc.message,
            )
        ]
    return _problem_response(
        request, status.HTTP_400_BAD_REQUEST, domain_exc.message, errors=errors
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking internals to the client."""
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )

    return _problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please contact support with the trace ID.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, domain_validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
