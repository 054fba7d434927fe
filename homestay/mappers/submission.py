from homestay.schemas.booking import BookingRequest, Quote

NOT_AVAILABLE_MESSAGE = "This place is not available for the selected dates."
VOUCHER_REJECTED_MESSAGE = "The voucher code is invalid or has expired."
GENERIC_FAILURE_MESSAGE = "Something went wrong while booking. Please try again."
NO_RESPONSE_MESSAGE = "No response from server. Please check your internet connection."


def build_submission_payload(request: BookingRequest, quote: Quote, user_id: str | None) -> dict:
    """Body for the booking backend. The price is taken from the quote as-is."""
    payload = {
        "placeId": request.place_id,
        "startDate": request.start_date.isoformat(),
        "endDate": request.end_date.isoformat(),
        "numberOfGuests": request.guest_count,
        "totalPrice": float(quote.total),
        "voucher": quote.voucher_code,
        "status": "Pending",
    }
    if user_id:
        payload["userId"] = user_id
    return payload


def submission_error_message(backend_message: str | None) -> str:
    """Turn the backend's error text into something to show the guest."""
    lowered = (backend_message or "").lower()
    if "not available" in lowered:
        return NOT_AVAILABLE_MESSAGE
    if "voucher" in lowered:
        return VOUCHER_REJECTED_MESSAGE
    return GENERIC_FAILURE_MESSAGE
