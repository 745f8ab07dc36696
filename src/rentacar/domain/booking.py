from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Iterable, Mapping


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    UNPAID = "unpaid"
    PAID = "paid"


BOOKING_TRANSITIONS: Mapping[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.COMPLETED, BookingStatus.CANCELLED}),
    BookingStatus.COMPLETED: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}

# The only change a renter may make to their own booking
OWNER_TRANSITIONS: Mapping[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CANCELLED}),
}


def _check_transition_table(table: Mapping[BookingStatus, frozenset[BookingStatus]]) -> None:
    missing = set(BookingStatus) - set(table)
    if missing:
        raise RuntimeError(f"Booking transition table is missing {sorted(s.value for s in missing)}")


_check_transition_table(BOOKING_TRANSITIONS)


def can_transition(current: BookingStatus, requested: BookingStatus) -> bool:
    return requested in BOOKING_TRANSITIONS[current]


def can_owner_transition(current: BookingStatus, requested: BookingStatus) -> bool:
    return requested in OWNER_TRANSITIONS.get(current, frozenset())


@dataclass(frozen=True, slots=True)
class CarSummary:
    id: str
    name: str
    brand: str
    price_per_day: int
    images: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class UserSummary:
    id: str
    name: str
    email: str
    phone: str | None = None


@dataclass(frozen=True)
class Booking:
    id: str
    user_id: str
    car_id: str
    start_date: date
    end_date: date
    days: int
    subtotal: int
    driver_fee: int
    total_price: int
    with_driver: bool = False
    status: BookingStatus = BookingStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.UNPAID
    notes: str | None = None
    created_at: datetime | None = None
    car: CarSummary | None = field(default=None, compare=False)
    user: UserSummary | None = field(default=None, compare=False)

    @property
    def is_active(self) -> bool:
        return self.status in (BookingStatus.PENDING, BookingStatus.CONFIRMED)


@dataclass(frozen=True, slots=True)
class NewBooking:
    """Booking fields supplied by the caller; the store assigns id and created_at."""

    user_id: str
    car_id: str
    start_date: date
    end_date: date
    days: int
    subtotal: int
    driver_fee: int
    total_price: int
    with_driver: bool = False
    notes: str | None = None
    status: BookingStatus = BookingStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.UNPAID


@dataclass(frozen=True, slots=True)
class BookingUpdate:
    status: BookingStatus | None = None
    payment_status: PaymentStatus | None = None


@dataclass(frozen=True, slots=True)
class BookingStats:
    total: int = 0
    pending: int = 0
    confirmed: int = 0
    completed: int = 0
    cancelled: int = 0
    revenue: int = 0


def compute_booking_stats(bookings: Iterable[Booking]) -> BookingStats:
    """Counts per status; revenue sums total_price of every non-cancelled booking."""
    counts = {status: 0 for status in BookingStatus}
    revenue = 0

    for booking in bookings:
        counts[booking.status] += 1
        if booking.status != BookingStatus.CANCELLED:
            revenue += booking.total_price

    return BookingStats(
        total=sum(counts.values()),
        pending=counts[BookingStatus.PENDING],
        confirmed=counts[BookingStatus.CONFIRMED],
        completed=counts[BookingStatus.COMPLETED],
        cancelled=counts[BookingStatus.CANCELLED],
        revenue=revenue,
    )
