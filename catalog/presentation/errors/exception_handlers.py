"""Global exception handlers for the FastAPI application.

Every error leaves the API as an RFC 9457 Problem Details document.

Handlers:
    http_exception_handler: HTTPException -> problem details
    validation_exception_handler: RequestValidationError -> 422 with field errors
    collection_error_handler: registry errors (unknown collection -> 404)
    generic_exception_handler: anything else -> 500
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from catalog.core.config import settings
from catalog.core.container import get_logger
from catalog.domain.errors import CollectionError, UnknownCollectionError
from catalog.presentation.errors.problem_details import ErrorDetail, ProblemDetails

# HTTP status code to (title, slug) mapping
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
    503: ("Service Unavailable", "service-unavailable"),
}


def _get_status_title(status_code: int) -> str:
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[0]


def _get_error_slug(status_code: int) -> str:
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[1]


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    *,
    code: str | None = None,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{_get_error_slug(status_code)}",
        title=_get_status_title(status_code),
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
        code=code,
        errors=errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to a Problem Details response.

    Example:
        >>> raise HTTPException(status_code=403, detail="Permission denied")
        >>> # {"type": ".../errors/forbidden", "title": "Access Denied",
        >>> #  "status": 403, "detail": "Permission denied", "instance": "/api/v1/tables"}
    """
    assert isinstance(exc, HTTPException)

    return _problem_response(
        request,
        exc.status_code,
        exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert RequestValidationError to a 422 with field-level errors."""
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "name"] -> "name"
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p != "body"]
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


async def collection_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert collection registry errors to Problem Details.

    An unknown collection is a 404; any other registry error reaching a
    request is a server fault.
    """
    assert isinstance(exc, CollectionError)

    if isinstance(exc, UnknownCollectionError):
        return _problem_response(
            request,
            status.HTTP_404_NOT_FOUND,
            exc.message,
            code=exc.code.value,
        )

    get_logger().error(
        "collection_error_in_request",
        error=exc,
        request_path=request.url.path,
    )
    return _problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred.",
        code=exc.code.value,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log the exception and return a 500 without internals."""
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )
    return _problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(CollectionError, collection_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
