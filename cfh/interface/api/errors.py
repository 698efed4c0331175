"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from cfh.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from cfh.util.jwt import JWTError


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message})


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


async def bad_request_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def unauthorized_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error(status.HTTP_401_UNAUTHORIZED, str(exc))


async def forbidden_handler(request: Request, exc: NotAuthorizedError) -> JSONResponse:
    return _error(status.HTTP_403_FORBIDDEN, "You can only access your own content")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error", path=request.url.path, error=str(exc), _exc_info=exc
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Map domain errors to status codes.

    NotFoundError is 404, validation and business rule errors are 400,
    authentication failures are 401 and ownership violations are 403.
    Anything else becomes a generic 500.
    """
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, bad_request_handler)
    app.add_exception_handler(BusinessRuleViolationError, bad_request_handler)
    app.add_exception_handler(AuthenticationError, unauthorized_handler)
    app.add_exception_handler(JWTError, unauthorized_handler)
    app.add_exception_handler(NotAuthorizedError, forbidden_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
