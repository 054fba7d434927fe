from typing import Annotated

from fastapi import Body, Depends, Header, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from homestay.config import Settings
from homestay.schemas.booking import BookingRequest
from homestay.services.booking import BookingService
from homestay.services.quote import QuoteService
from homestay.services.voucher import VoucherService
from homestay.session import Session


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_voucher_service(request: Request) -> VoucherService:
    return request.app.state.voucher_service


def get_quote_service(request: Request) -> QuoteService:
    return request.app.state.quote_service


def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking_service


def get_session(
    authorization: Annotated[str | None, Header()] = None,
    x_user_id: Annotated[str | None, Header()] = None,
) -> Session:
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization[len("bearer "):].strip() or None
    return Session(token=token, user_id=x_user_id)


SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_booking_request(
    payload: Annotated[dict, Body()],
    settings: SettingsDep,
) -> BookingRequest:
    """Parse the booking body, reading timestamps in the configured local zone."""
    try:
        return BookingRequest.model_validate(payload, context={"timezone": settings.timezone})
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False)
        for error in errors:
            error["loc"] = ("body", *error["loc"])
        raise RequestValidationError(errors) from exc


VoucherDep = Annotated[VoucherService, Depends(get_voucher_service)]
QuoteDep = Annotated[QuoteService, Depends(get_quote_service)]
BookingDep = Annotated[BookingService, Depends(get_booking_service)]
SessionDep = Annotated[Session, Depends(get_session)]
BookingRequestDep = Annotated[BookingRequest, Depends(get_booking_request)]
