"""Mapping of auth error codes to HTTP responses.

Use cases return ``AuthError`` values; routers and the guard dependency
raise ``AuthErrorException`` with them, and the handler registered here
turns that into a consistent error body:

    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tessera_auth import AuthError, AuthErrorCode

logger = logging.getLogger(__name__)


ERROR_CODE_TO_STATUS: dict[AuthErrorCode, int] = {
    AuthErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    AuthErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    AuthErrorCode.NO_TOKEN_PROVIDED: status.HTTP_401_UNAUTHORIZED,
    AuthErrorCode.DUPLICATE_IDENTITY: status.HTTP_409_CONFLICT,
    AuthErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


class AuthErrorException(Exception):
    """Carries an AuthError out of a route handler or dependency."""

    def __init__(self, error: AuthError):
        self.error = error
        super().__init__(error.message)


async def auth_error_handler(_: Request, exc: AuthErrorException) -> JSONResponse:
    status_code = ERROR_CODE_TO_STATUS[exc.error.code]
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    logger.debug("Request failed: %s (%s)", exc.error.code.value, status_code)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.error.message, "code": exc.error.code.value},
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the auth error handler on the application."""
    app.add_exception_handler(AuthErrorException, auth_error_handler)  # type: ignore[arg-type]
