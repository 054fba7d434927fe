import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo

from homestay.config import DEFAULT_TIMEZONE
from homestay.mappers.date_range import validate_stay_dates
from homestay.mappers.pricing import build_quote
from homestay.mappers.surcharge import EXTRA_GUEST_ALLOWANCE, check_guest_count
from homestay.schemas.booking import (
    BookingRequest,
    DateError,
    QuoteError,
    QuoteResult,
    VoucherStatus,
)
from homestay.services.voucher import VoucherService
from homestay.session import Session

logger = logging.getLogger(__name__)

_DATE_MESSAGES = {
    DateError.past_check_in: "Check-in date cannot be in the past",
    DateError.inverted_range: "Check-out date must be after check-in date",
}


class QuoteService:
    def __init__(
        self,
        vouchers: VoucherService,
        extra_guest_allowance: int = EXTRA_GUEST_ALLOWANCE,
        timezone: str = DEFAULT_TIMEZONE,
    ):
        self._vouchers = vouchers
        self._extra_guest_allowance = extra_guest_allowance
        self._tz = ZoneInfo(timezone)

    def local_today(self) -> date:
        return datetime.now(self._tz).date()

    async def compute_quote(
        self,
        request: BookingRequest,
        session: Session | None = None,
        today: date | None = None,
    ) -> QuoteResult:
        """Validate the stay, resolve the voucher if any, and price it.

        Validation problems and a failed voucher lookup come back as
        QuoteResult.error. An invalid voucher still yields a quote, priced
        without discount and flagged through voucher_status.
        """
        nights = validate_stay_dates(request.start_date, request.end_date, today or self.local_today())
        if isinstance(nights, DateError):
            return QuoteResult(error=QuoteError(nights.value), message=_DATE_MESSAGES[nights])

        guest_error = check_guest_count(
            request.guest_count, request.max_guests, self._extra_guest_allowance
        )
        if guest_error is not None:
            return QuoteResult(
                error=QuoteError.guest_count_out_of_range,
                message=f"Guest count {request.guest_count} is not allowed for this place",
            )

        if request.voucher_code is None:
            return QuoteResult(quote=build_quote(request, nights))

        resolution = await self._vouchers.resolve(request.voucher_code, session)
        if resolution.status == VoucherStatus.empty_code:
            return QuoteResult(
                error=QuoteError.empty_voucher_code,
                voucher_status=resolution.status,
                message=resolution.message,
            )
        if resolution.status == VoucherStatus.lookup_failed:
            return QuoteResult(
                error=QuoteError.voucher_lookup_failed,
                voucher_status=resolution.status,
                message=resolution.message,
            )

        if not resolution.is_applicable:
            logger.info("Quoting place %s without voucher %s", request.place_id, request.voucher_code)

        return QuoteResult(
            quote=build_quote(request, nights, resolution.voucher),
            voucher_status=resolution.status,
            message=resolution.message,
        )
