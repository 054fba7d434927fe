import logging

from fastapi import APIRouter

from homestay.dependencies import BookingDep, BookingRequestDep, QuoteDep, SessionDep
from homestay.exceptions.custom import AuthenticationRequiredError
from homestay.routers.quotes import quote_error_response
from homestay.schemas.booking import BookingConfirmation

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/bookings", response_model=BookingConfirmation, status_code=201)
async def create_booking(
    request: BookingRequestDep,
    quotes: QuoteDep,
    bookings: BookingDep,
    session: SessionDep,
) -> BookingConfirmation:
    if not session.is_authenticated:
        raise AuthenticationRequiredError("book this place")

    result = await quotes.compute_quote(request, session=session)
    if not result.ok:
        logger.info("Booking for place %s not submitted: %s", request.place_id, result.error)
        return quote_error_response(result)

    return await bookings.submit(request, result.quote, session)
