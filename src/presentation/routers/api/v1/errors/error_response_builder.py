"""Error response builder for RFC 9457 Problem Details.

Converts application layer errors into Problem Details JSON responses.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# Application error code -> (HTTP status, title)
_ERROR_STATUS: dict[ApplicationErrorCode, tuple[int, str]] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
    ),
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Command Execution Failed",
    ),
    ApplicationErrorCode.QUERY_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Query Failed",
    ),
    ApplicationErrorCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ApplicationErrorCode.CONFLICT: (status.HTTP_409_CONFLICT, "Resource Conflict"),
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> match await handler.handle(command):
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_application_error(
        ...             error=error, request=request, trace_id=get_trace_id() or "",
        ...         )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to an RFC 9457 JSON response.

        Validation failures that name a field get a single ErrorDetail
        whose code is the domain error code (e.g. "invalid_email").
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder.get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            trace_id=trace_id or None,
        )

        field = (error.details or {}).get("field")
        if error.code is ApplicationErrorCode.COMMAND_VALIDATION_FAILED and field:
            problem.errors = [
                ErrorDetail(
                    field=field,
                    code=(
                        error.domain_error.code.value
                        if error.domain_error
                        else error.code.value
                    ),
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ApplicationErrorCode.NOT_FOUND)
            404
        """
        return _ERROR_STATUS.get(code, (status.HTTP_500_INTERNAL_SERVER_ERROR, ""))[0]

    @staticmethod
    def get_title(code: ApplicationErrorCode) -> str:
        return _ERROR_STATUS.get(code, (0, "Internal Server Error"))[1]
