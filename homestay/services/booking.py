import logging

import httpx

from homestay.exceptions.custom import AuthenticationRequiredError, BookingSubmissionError
from homestay.mappers.submission import (
    GENERIC_FAILURE_MESSAGE,
    NO_RESPONSE_MESSAGE,
    build_submission_payload,
    submission_error_message,
)
from homestay.schemas.booking import BookingConfirmation, BookingRequest, Quote
from homestay.session import Session

logger = logging.getLogger(__name__)

NEW_BOOKING_PATH = "/bookings/new-booking"


def _backend_message(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return resp.text
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return resp.text


class BookingService:
    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self._client = client
        self._url = base_url.rstrip("/") + NEW_BOOKING_PATH

    async def submit(
        self, request: BookingRequest, quote: Quote, session: Session
    ) -> BookingConfirmation:
        """Create a pending booking for an already computed quote. Not retried."""
        if not session.is_authenticated:
            raise AuthenticationRequiredError("book this place")

        payload = build_submission_payload(request, quote, session.user_id)
        try:
            resp = await self._client.post(self._url, json=payload, headers=session.auth_headers())
        except httpx.HTTPError as exc:
            logger.error("Booking submission for place %s got no response: %s", request.place_id, exc)
            raise BookingSubmissionError(NO_RESPONSE_MESSAGE) from exc

        if resp.status_code >= 400:
            backend_message = _backend_message(resp)
            logger.warning(
                "Booking for place %s rejected (status=%s): %s",
                request.place_id, resp.status_code, backend_message,
            )
            raise BookingSubmissionError(
                submission_error_message(backend_message), status_code=resp.status_code
            )

        booking_id = self._extract_booking_id(resp)
        if booking_id is None:
            logger.error("Booking response for place %s has no id: %s", request.place_id, resp.text)
            raise BookingSubmissionError(GENERIC_FAILURE_MESSAGE, status_code=502)

        logger.info("Created booking %s for place %s", booking_id, request.place_id)
        return BookingConfirmation(
            booking_id=booking_id,
            place_id=request.place_id,
            total_price=quote.total,
            voucher_code=quote.voucher_code,
        )

    @staticmethod
    def _extract_booking_id(resp: httpx.Response) -> str | None:
        try:
            data = resp.json()
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None
        if isinstance(data.get("booking"), dict):
            data = data["booking"]
        for key in ("id", "bookingId", "_id"):
            if data.get(key) is not None:
                return str(data[key])
        return None
