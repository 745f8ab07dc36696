from __future__ import annotations

import uuid
from dataclasses import asdict, replace
from datetime import datetime, timezone

from rentacar.domain.booking import (
    Booking,
    BookingStats,
    BookingUpdate,
    CarSummary,
    NewBooking,
    UserSummary,
    compute_booking_stats,
)
from rentacar.domain.errors import NotFoundError
from rentacar.ports.booking_repository import BookingRepository
from rentacar.ports.car_repository import CarRepository
from rentacar.ports.user_repository import UserRepository


class InMemoryBookingRepository(BookingRepository):
    """
    Canonical contract implementation for tests.

    - Bookings are kept newest first
    - Car/user summaries are joined from the given repositories when provided
    """

    def __init__(
        self,
        bookings: list[Booking] | None = None,
        cars: CarRepository | None = None,
        users: UserRepository | None = None,
    ) -> None:
        self._bookings = list(bookings or [])
        self._cars = cars
        self._users = users

    def list_all(self) -> list[Booking]:
        return [self._join(b, with_user=True) for b in self._bookings]

    def list_for_user(self, user_id: str) -> list[Booking]:
        return [self._join(b) for b in self._bookings if b.user_id == user_id]

    def get_by_id(self, booking_id: str) -> Booking | None:
        booking = next((b for b in self._bookings if b.id == booking_id), None)
        return self._join(booking, with_user=True) if booking else None

    def create(self, new_booking: NewBooking) -> Booking:
        booking = Booking(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            **asdict(new_booking),
        )
        self._bookings.insert(0, booking)
        return booking

    def update(self, booking_id: str, update: BookingUpdate) -> Booking:
        for index, booking in enumerate(self._bookings):
            if booking.id != booking_id:
                continue
            updated = replace(
                booking,
                status=update.status or booking.status,
                payment_status=update.payment_status or booking.payment_status,
            )
            self._bookings[index] = updated
            return updated
        raise NotFoundError(resource="Booking", identifier=booking_id)

    def delete(self, booking_id: str) -> None:
        self._bookings = [b for b in self._bookings if b.id != booking_id]

    def get_stats(self) -> BookingStats:
        return compute_booking_stats(self._bookings)

    def _join(self, booking: Booking, with_user: bool = False) -> Booking:
        car_summary = None
        if self._cars is not None:
            car = self._cars.get_by_id(booking.car_id)
            if car is not None:
                car_summary = CarSummary(
                    id=car.id,
                    name=car.name,
                    brand=car.brand,
                    price_per_day=car.price_per_day,
                    images=car.images,
                )

        user_summary = None
        if with_user and self._users is not None:
            user = self._users.get_by_id(booking.user_id)
            if user is not None:
                user_summary = UserSummary(id=user.id, name=user.name, email=user.email, phone=user.phone)

        return replace(booking, car=car_summary, user=user_summary)
