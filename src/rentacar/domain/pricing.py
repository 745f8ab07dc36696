from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from rentacar.domain.car import is_money
from rentacar.domain.errors import ValidationError

DEFAULT_DRIVER_DAILY_RATE = 150_000

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True, slots=True)
class BookingQuote:
    days: int
    subtotal: int
    driver_fee: int
    total: int


ZERO_QUOTE = BookingQuote(days=0, subtotal=0, driver_fee=0, total=0)


def rental_days(start: date, end: date) -> int:
    """
    Whole rental days between two dates, rounded up.

    Accepts two ``date`` or two ``datetime`` values. A partial day counts
    as a full day; an empty or reversed range yields 0.

    Raises:
        ValidationError: If a date is mixed with a datetime
    """
    if isinstance(start, datetime) != isinstance(end, datetime):
        raise ValidationError("start_date and end_date must both be dates or both be datetimes")

    # ceil(delta / 1 day) without leaving integer arithmetic
    days = -((start - end) // _ONE_DAY)
    return days if days > 0 else 0


def quote_booking(
    start: date,
    end: date,
    price_per_day: int,
    with_driver: bool = False,
    driver_daily_rate: int = DEFAULT_DRIVER_DAILY_RATE,
) -> BookingQuote:
    """
    Price a rental.

    subtotal = days * price_per_day
    driver_fee = days * driver_daily_rate when a driver is requested, else 0
    total = subtotal + driver_fee

    A range of zero days prices to all zeros; callers must refuse to book it.

    Raises:
        ValidationError: If a rate is not a non-negative integer
    """
    if not is_money(price_per_day) or price_per_day < 0:
        raise ValidationError("price_per_day must be a non-negative integer")
    if not is_money(driver_daily_rate) or driver_daily_rate < 0:
        raise ValidationError("driver_daily_rate must be a non-negative integer")

    days = rental_days(start, end)
    if days == 0:
        return ZERO_QUOTE

    subtotal = days * price_per_day
    driver_fee = days * driver_daily_rate if with_driver else 0

    return BookingQuote(
        days=days,
        subtotal=subtotal,
        driver_fee=driver_fee,
        total=subtotal + driver_fee,
    )
