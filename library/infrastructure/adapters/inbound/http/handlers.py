"""
Exception handlers for the HTTP API.

Every error response has the same shape:

    {"error": {"code": ..., "message": ..., "details": ...},
     "meta": {"request_id": ...}}
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from library.application.dto.reservation_dto import ReservationFailureReason
from library.application.exceptions import (
    ApplicationError,
    CirculationConflictError,
    NotFoundError,
)
from library.domain.exceptions import (
    DomainException,
    InvalidBookStateError,
    InvalidReservationStateTransitionError,
    InvalidUserStateTransitionError,
    ReservationAlreadyExistsError,
    ReservationExpiredError,
)

logger = logging.getLogger(__name__)

FAILURE_STATUS_CODES: dict[ReservationFailureReason, int] = {
    ReservationFailureReason.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ReservationFailureReason.BOOK_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ReservationFailureReason.RESERVATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ReservationFailureReason.USER_INACTIVE: status.HTTP_403_FORBIDDEN,
    ReservationFailureReason.BOOK_AVAILABLE: status.HTTP_409_CONFLICT,
    ReservationFailureReason.ALREADY_RESERVED: status.HTTP_409_CONFLICT,
    ReservationFailureReason.NOT_CANCELLABLE: status.HTTP_409_CONFLICT,
    ReservationFailureReason.ALREADY_CANCELLED: status.HTTP_409_CONFLICT,
}

_CONFLICTING_DOMAIN_ERRORS = (
    InvalidBookStateError,
    InvalidReservationStateTransitionError,
    InvalidUserStateTransitionError,
    ReservationAlreadyExistsError,
    ReservationExpiredError,
)


def failure_status_code(reason: ReservationFailureReason | None) -> int:
    """Map a use-case refusal reason to an HTTP status code."""
    if reason is None:
        return status.HTTP_400_BAD_REQUEST
    return FAILURE_STATUS_CODES.get(reason, status.HTTP_400_BAD_REQUEST)


def error_body(request: Request, code: str, message: str, details: Any) -> dict[str, Any]:
    return {
        "error": {"code": code, "message": message, "details": details},
        "meta": {"request_id": getattr(request.state, "request_id", None)},
    }


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """Handle application layer errors (unknown resources, circulation conflicts)."""
    if isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, CirculationConflictError):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    logger.warning(
        f"Application error: {exc.code} - {exc.message} "
        f"(request_id={getattr(request.state, 'request_id', 'unknown')})"
    )
    return JSONResponse(
        status_code=status_code,
        content=error_body(request, exc.code, exc.message, exc.details),
    )


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """
    Handle domain rule violations.

    Malformed identifiers and invalid values are client errors (400);
    illegal state transitions conflict with the current state (409).
    """
    if isinstance(exc, _CONFLICTING_DOMAIN_ERRORS):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    logger.warning(
        f"Domain exception: {exc.code} - {exc.message} "
        f"(request_id={getattr(request.state, 'request_id', 'unknown')})"
    )
    return JSONResponse(
        status_code=status_code,
        content=error_body(request, exc.code, exc.message, {}),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request body and parameter validation errors."""
    logger.warning(
        f"Validation error: {exc.errors()} "
        f"(request_id={getattr(request.state, 'request_id', 'unknown')})"
    )

    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_body(request, "VALIDATION_ERROR", "Request validation failed", errors),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected errors and return a generic 500 response."""
    logger.error(
        f"Unexpected error: {exc} "
        f"(request_id={getattr(request.state, 'request_id', 'unknown')})",
        exc_info=True,
    )

    debug = request.app.state.container.settings.debug
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            request,
            "INTERNAL_ERROR",
            str(exc) if debug else "An unexpected error occurred.",
            {},
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler to the application."""
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
