from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import StrEnum
from zoneinfo import ZoneInfo

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from homestay.config import DEFAULT_TIMEZONE


class DateError(StrEnum):
    past_check_in = "past_check_in"
    inverted_range = "inverted_range"


class GuestCountError(StrEnum):
    below_minimum = "below_minimum"
    above_maximum = "above_maximum"


class VoucherStatus(StrEnum):
    valid = "valid"
    invalid = "invalid"  # not found / expired: proceed without discount
    empty_code = "empty_code"
    lookup_failed = "lookup_failed"  # transport fault, user may retry


class QuoteError(StrEnum):
    past_check_in = "past_check_in"
    inverted_range = "inverted_range"
    guest_count_out_of_range = "guest_count_out_of_range"
    empty_voucher_code = "empty_voucher_code"
    voucher_lookup_failed = "voucher_lookup_failed"


def _to_date(value, tz: ZoneInfo):
    """Accept ISO datetimes from the app (toISOString) and keep only the local date.

    Aware timestamps are moved into tz first: local midnight of the 12th in
    UTC+7 arrives as 17:00Z on the 11th and must still mean the 12th.
    """
    if isinstance(value, str) and "T" in value:
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


class BookingRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    place_id: str
    start_date: date
    end_date: date
    guest_count: int = Field(ge=1)
    nightly_rate: Decimal = Field(ge=0)
    voucher_code: str | None = None
    max_guests: int | None = Field(default=None, ge=1)  # place capacity

    @field_validator("place_id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return str(value) if isinstance(value, int) else value

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _truncate_datetime(cls, value, info: ValidationInfo):
        tz = (info.context or {}).get("timezone") or DEFAULT_TIMEZONE
        return _to_date(value, ZoneInfo(tz) if isinstance(tz, str) else tz)


class Voucher(BaseModel):
    code: str
    discount_percent: Decimal = Field(
        ge=0,
        le=100,
        validation_alias=AliasChoices("discount_percent", "discountPercent", "discount"),
        serialization_alias="discountPercent",
    )


class VoucherResolution(BaseModel):
    status: VoucherStatus
    voucher: Voucher | None = None
    message: str | None = None

    @property
    def is_applicable(self) -> bool:
        return self.status == VoucherStatus.valid and self.voucher is not None


class Quote(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    nights: int = Field(ge=1)
    nightly_rate: Decimal
    subtotal: Decimal
    surcharge: Decimal
    discount: Decimal
    total: Decimal = Field(ge=0)
    voucher_code: str | None = None


class QuoteResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    quote: Quote | None = None
    error: QuoteError | None = None
    voucher_status: VoucherStatus | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.quote is not None


class BookingConfirmation(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    booking_id: str
    place_id: str
    total_price: Decimal
    status: str = "Pending"
    voucher_code: str | None = None
