from __future__ import annotations

from rentacar.domain.booking import Booking, BookingStats
from rentacar.domain.errors import ForbiddenError
from rentacar.ports.booking_repository import BookingRepository
from rentacar.ports.user_repository import UserRepository
from rentacar.use_cases.authorization import load_actor, require_admin


class ListUserBookings:
    """A user's bookings, newest first. Visible to the user and to administrators."""

    def __init__(self, user_repository: UserRepository, booking_repository: BookingRepository) -> None:
        self._users = user_repository
        self._bookings = booking_repository

    def execute(self, actor_id: str, user_id: str) -> list[Booking]:
        actor = load_actor(self._users, actor_id)
        if actor.id != user_id and not actor.is_admin:
            raise ForbiddenError("Cannot view another user's bookings", actor_id=actor_id)
        return self._bookings.list_for_user(user_id)


class ListAllBookings:
    """Every booking with user and car summaries, newest first. Administrators only."""

    def __init__(self, user_repository: UserRepository, booking_repository: BookingRepository) -> None:
        self._users = user_repository
        self._bookings = booking_repository

    def execute(self, actor_id: str) -> list[Booking]:
        require_admin(self._users, actor_id)
        return self._bookings.list_all()


class GetBookingStats:
    """Per-status counts and revenue (non-cancelled totals). Administrators only."""

    def __init__(self, user_repository: UserRepository, booking_repository: BookingRepository) -> None:
        self._users = user_repository
        self._bookings = booking_repository

    def execute(self, actor_id: str) -> BookingStats:
        require_admin(self._users, actor_id)
        return self._bookings.get_stats()
