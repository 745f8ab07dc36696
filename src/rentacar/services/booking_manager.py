"""Booking state for one client context."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date

from rentacar.domain.booking import Booking, BookingStats, BookingStatus
from rentacar.ports.booking_repository import BookingRepository
from rentacar.ports.car_repository import CarRepository
from rentacar.ports.settings_repository import SettingsRepository
from rentacar.ports.user_repository import UserRepository
from rentacar.services.session_manager import SessionManager
from rentacar.use_cases.create_booking import CreateBooking, CreateBookingRequest
from rentacar.use_cases.list_bookings import GetBookingStats, ListAllBookings, ListUserBookings
from rentacar.use_cases.update_booking_status import (
    MarkBookingPaid,
    MarkBookingPaidRequest,
    UpdateBookingStatus,
    UpdateBookingStatusRequest,
)

logger = logging.getLogger(__name__)


class BookingManager:
    """
    Owns the current user's booking list (newest first).

    The cached list only changes after the storage call behind an operation
    has succeeded, so a failed operation leaves it untouched.
    """

    def __init__(
        self,
        session: SessionManager,
        user_repository: UserRepository,
        car_repository: CarRepository,
        booking_repository: BookingRepository,
        settings_repository: SettingsRepository,
    ) -> None:
        self._session = session
        self._create = CreateBooking(user_repository, car_repository, booking_repository, settings_repository)
        self._update_status = UpdateBookingStatus(user_repository, booking_repository)
        self._mark_paid = MarkBookingPaid(user_repository, booking_repository)
        self._list_for_user = ListUserBookings(user_repository, booking_repository)
        self._list_all = ListAllBookings(user_repository, booking_repository)
        self._stats = GetBookingStats(user_repository, booking_repository)
        self._bookings: list[Booking] = []
        self._owner_id: str | None = None

    @property
    def bookings(self) -> tuple[Booking, ...]:
        return tuple(self._cached())

    @property
    def active_bookings(self) -> tuple[Booking, ...]:
        return tuple(b for b in self._cached() if b.is_active)

    def load(self) -> list[Booking]:
        """Replace the cache with the current user's stored bookings."""
        user = self._session.require_user()
        bookings = self._list_for_user.execute(actor_id=user.id, user_id=user.id)
        self.apply_loaded(user.id, bookings)
        return bookings

    def apply_loaded(self, user_id: str, bookings: list[Booking]) -> None:
        """Install fetched bookings unless the identity has changed since the fetch."""
        current = self._session.current_user
        if current is None or current.id != user_id:
            logger.debug("Dropping bookings fetched for a previous identity", extra={"user_id": user_id})
            return
        self._bookings = list(bookings)
        self._owner_id = user_id

    def reset(self) -> None:
        self._bookings = []
        self._owner_id = None

    def create(
        self,
        car_id: str,
        start_date: date,
        end_date: date,
        with_driver: bool = False,
        notes: str | None = None,
    ) -> Booking:
        """
        Book a car for the current user.

        Raises:
            UnauthorizedError: If nobody is logged in
            NotFoundError: If the car doesn't exist
            ValidationError: If the rental duration is not bookable
            PersistenceError: If the booking could not be stored
        """
        user = self._session.require_user()
        booking = self._create.execute(
            CreateBookingRequest(
                user_id=user.id,
                car_id=car_id,
                start_date=start_date,
                end_date=end_date,
                with_driver=with_driver,
                notes=notes,
            )
        )

        if self._owner_id in (None, user.id):
            self._bookings = [booking, *self._bookings]
            self._owner_id = user.id
        return booking

    def update_status(self, booking_id: str, status: BookingStatus) -> Booking:
        """
        Raises:
            UnauthorizedError: If nobody is logged in
            InvalidTransitionError: If the lifecycle doesn't allow the change
            ForbiddenError: If a renter attempts anything but cancelling a pending booking
        """
        user = self._session.require_user()
        updated = self._update_status.execute(
            UpdateBookingStatusRequest(actor_id=user.id, booking_id=booking_id, status=status)
        )
        self._refresh_cached(updated)
        return updated

    def cancel(self, booking_id: str) -> Booking:
        return self.update_status(booking_id, BookingStatus.CANCELLED)

    def mark_paid(self, booking_id: str) -> Booking:
        user = self._session.require_user()
        updated = self._mark_paid.execute(MarkBookingPaidRequest(actor_id=user.id, booking_id=booking_id))
        self._refresh_cached(updated)
        return updated

    def list_for_user(self, user_id: str) -> list[Booking]:
        user = self._session.require_user()
        return self._list_for_user.execute(actor_id=user.id, user_id=user_id)

    def list_all(self) -> list[Booking]:
        user = self._session.require_user()
        return self._list_all.execute(actor_id=user.id)

    def get_stats(self) -> BookingStats:
        user = self._session.require_user()
        return self._stats.execute(actor_id=user.id)

    def _cached(self) -> list[Booking]:
        current = self._session.current_user
        if current is None or current.id != self._owner_id:
            return []
        return self._bookings

    def _refresh_cached(self, updated: Booking) -> None:
        # Keep the joined summaries from the cached copy
        self._bookings = [
            replace(b, status=updated.status, payment_status=updated.payment_status)
            if b.id == updated.id
            else b
            for b in self._bookings
        ]
