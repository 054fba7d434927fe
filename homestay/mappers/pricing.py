from decimal import Decimal

from homestay.mappers.surcharge import compute_surcharge
from homestay.schemas.booking import BookingRequest, Quote, Voucher


def build_quote(request: BookingRequest, nights: int, voucher: Voucher | None = None) -> Quote:
    """Price breakdown for a stay. Pure: same inputs, same Quote.

    The voucher percentage applies to subtotal + surcharge, and the total
    never goes below zero.
    """
    subtotal = request.nightly_rate * nights
    surcharge = compute_surcharge(subtotal, request.guest_count)

    discount = Decimal(0)
    if voucher is not None:
        discount = (subtotal + surcharge) * voucher.discount_percent / 100

    total = max(Decimal(0), subtotal + surcharge - discount)

    return Quote(
        nights=nights,
        nightly_rate=request.nightly_rate,
        subtotal=subtotal,
        surcharge=surcharge,
        discount=discount,
        total=total,
        voucher_code=voucher.code if voucher else None,
    )
