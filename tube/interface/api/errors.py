"""Exception handlers mapping errors to HTTP responses.

Every error response has the same shape::

    {"error": {"code": "not_found", "message": "comment not found: ..."}}
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tube.domain.error import (
    DependencyError,
    DomainError,
    ForbiddenError,
    InvariantViolationError,
    NotFoundError,
    ValidationError,
)
from tube.interface.error import UnauthenticatedError

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvariantViolationError: status.HTTP_409_CONFLICT,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    DependencyError: status.HTTP_502_BAD_GATEWAY,
}


def error_body(code: str, message: str) -> dict:
    """Build the JSON error envelope."""
    return {"error": {"code": code, "message": message}}


def status_for(error: DomainError) -> int:
    """Return the HTTP status for a domain error (500 when unmapped)."""
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            code=exc.code,
            error=str(exc),
        )
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            code=exc.code,
            error=str(exc),
        )
    return JSONResponse(status_code=status_code, content=error_body(exc.code, str(exc)))


async def handle_unauthenticated(
    request: Request, exc: UnauthenticatedError
) -> JSONResponse:
    logfire.warn("Unauthenticated request", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=error_body(exc.code, str(exc)),
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception(
        "Unhandled error",
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("internal_error", "internal server error"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(UnauthenticatedError, handle_unauthenticated)
    app.add_exception_handler(Exception, handle_unexpected)
