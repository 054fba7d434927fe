import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import AuthenticationRequiredError, BookingSubmissionError

logger = logging.getLogger(__name__)


async def booking_submission_error_handler(
    _request: Request, exc: BookingSubmissionError
) -> JSONResponse:
    logger.error("Booking submission error: %s (status=%s)", exc.message, exc.status_code)
    status_code = exc.status_code if exc.status_code and 400 <= exc.status_code < 500 else 502
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message},
    )


async def authentication_required_handler(
    _request: Request, exc: AuthenticationRequiredError
) -> JSONResponse:
    logger.warning("Unauthenticated request tried to %s", exc.action)
    return JSONResponse(
        status_code=401,
        content={"detail": f"Please log in to {exc.action}"},
    )
