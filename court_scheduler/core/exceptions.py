"""Application errors and their HTTP mapping."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from court_scheduler.core.config import settings

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    """A referenced record does not exist."""


class BookingValidationError(ValueError):
    """A proposed booking is missing a field or has an invalid time selection."""


class BookingConflictError(ValueError):
    """A proposed booking overlaps an existing booking for the same court."""

    def __init__(self, message: str = "This time slot overlaps with an existing booking"):
        super().__init__(message)


class AuthenticationRequired(Exception):
    """No valid session was presented for an admin resource."""

    def __init__(self, reason: str = "Authentication required"):
        super().__init__(reason)
        self.reason = reason


class PermissionDenied(Exception):
    """The session is valid but the account lacks the required role."""

    def __init__(self, reason: str = "Admin role required"):
        super().__init__(reason)
        self.reason = reason


def _wants_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "")


async def booking_validation_handler(request: Request, exc: BookingValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "type": "validation_error"},
    )


async def booking_conflict_handler(request: Request, exc: BookingConflictError):
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc), "type": "conflict_error"},
    )


async def authentication_required_handler(request: Request, exc: AuthenticationRequired):
    if _wants_html(request):
        return RedirectResponse(settings.LOGIN_URL, status_code=status.HTTP_303_SEE_OTHER)
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": exc.reason, "type": "auth_error", "login_url": settings.LOGIN_URL},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def permission_denied_handler(request: Request, exc: PermissionDenied):
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"detail": exc.reason, "type": "auth_error"},
    )


async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Store error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc), "type": "store_error"},
    )


def register_exception_handlers(app: FastAPI):
    """Attach the handlers for every application error to the app."""
    app.add_exception_handler(BookingValidationError, booking_validation_handler)
    app.add_exception_handler(BookingConflictError, booking_conflict_handler)
    app.add_exception_handler(AuthenticationRequired, authentication_required_handler)
    app.add_exception_handler(PermissionDenied, permission_denied_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
