from datetime import date, datetime

from homestay.schemas.booking import DateError


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def count_nights(start_date: date | datetime, end_date: date | datetime) -> int:
    """Calendar nights between check-in and check-out.

    This is the only place a stay duration is derived. A stay from the 12th
    to the 14th is 2 nights; there is no extra "+1" for the check-in day.
    """
    return (_as_date(end_date) - _as_date(start_date)).days


def validate_stay_dates(
    start_date: date | datetime,
    end_date: date | datetime,
    today: date | datetime,
) -> int | DateError:
    """Return the night count, or the DateError explaining why the pair is rejected.

    Comparisons are date-only; time of day is ignored.
    """
    start, end = _as_date(start_date), _as_date(end_date)
    if start < _as_date(today):
        return DateError.past_check_in
    if end <= start:
        return DateError.inverted_range
    return count_nights(start, end)
