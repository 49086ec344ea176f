"""
Error taxonomy for the auth flow and the global exception handler.

Service-level errors are caught at the AuthService boundary and turned into
AuthResult objects; anything that escapes a handler ends up in
global_exception_handler as a generic 500.
"""

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class AppError(Exception):
    """Base class for all application exceptions."""

    default_message = "Application error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed email or password outside the length policy."""

    default_message = "Invalid input"
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AppError):
    """Email already taken."""

    default_message = "Email already registered"
    status_code = status.HTTP_400_BAD_REQUEST


class CredentialError(AppError):
    """Unknown email or wrong password. Both cases share one message."""

    default_message = "Invalid credentials"
    status_code = status.HTTP_401_UNAUTHORIZED


class NotAuthenticatedError(AppError):
    default_message = "Not authenticated"
    status_code = status.HTTP_401_UNAUTHORIZED


class UserNotFoundError(AppError):
    default_message = "User not found"
    status_code = status.HTTP_404_NOT_FOUND


class UnexpectedError(AppError):
    """Store unavailable, I/O failure. Details are logged, never returned."""

    default_message = INTERNAL_ERROR_MESSAGE
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""
    logger.error("Unhandled error", path=request.url.path, error_type=type(exc).__name__, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": INTERNAL_ERROR_MESSAGE},
    )
