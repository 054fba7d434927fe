from decimal import Decimal

from homestay.schemas.booking import GuestCountError

SURCHARGE_GUEST_THRESHOLD = 3
SURCHARGE_RATE = Decimal("0.3")
EXTRA_GUEST_ALLOWANCE = 2


def compute_surcharge(subtotal: Decimal, guest_count: int) -> Decimal:
    """30% of the subtotal for parties of 3 or more, nothing otherwise."""
    if guest_count >= SURCHARGE_GUEST_THRESHOLD:
        return subtotal * SURCHARGE_RATE
    return Decimal(0)


def max_guests_allowed(max_guests: int, allowance: int = EXTRA_GUEST_ALLOWANCE) -> int:
    return max_guests + allowance


def check_guest_count(
    guest_count: int,
    max_guests: int | None,
    allowance: int = EXTRA_GUEST_ALLOWANCE,
) -> GuestCountError | None:
    if guest_count < 1:
        return GuestCountError.below_minimum
    if max_guests is not None and guest_count > max_guests_allowed(max_guests, allowance):
        return GuestCountError.above_maximum
    return None
