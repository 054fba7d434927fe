import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from homestay.config import Settings
from homestay.exceptions.custom import AuthenticationRequiredError, BookingSubmissionError
from homestay.exceptions.handlers import (
    authentication_required_handler,
    booking_submission_error_handler,
)
from homestay.routers.bookings import router as bookings_router
from homestay.routers.catalog import router as catalog_router
from homestay.routers.quotes import router as quotes_router
from homestay.routers.vouchers import router as vouchers_router
from homestay.services.booking import BookingService
from homestay.services.quote import QuoteService
from homestay.services.voucher import VoucherService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.api_timeout_seconds) as client:
        vouchers = VoucherService(client, settings.api_base_url)

        app.state.settings = settings
        app.state.voucher_service = vouchers
        app.state.quote_service = QuoteService(
            vouchers,
            extra_guest_allowance=settings.extra_guest_allowance,
            timezone=settings.timezone,
        )
        app.state.booking_service = BookingService(client, settings.api_base_url)

        yield


app = FastAPI(title="Homestay Booking Engine", lifespan=lifespan)

app.add_exception_handler(BookingSubmissionError, booking_submission_error_handler)
app.add_exception_handler(AuthenticationRequiredError, authentication_required_handler)

app.include_router(quotes_router)
app.include_router(vouchers_router)
app.include_router(catalog_router)
app.include_router(bookings_router)
