from __future__ import annotations

from abc import ABC, abstractmethod

from rentacar.domain.booking import Booking, BookingStats, BookingUpdate, NewBooking


class BookingRepository(ABC):
    """
    Port for bookings.

    Contract:
        - list_all joins user and car summaries; list_for_user joins car summaries
        - both lists are ordered newest first
        - get_by_id returns None when absent
    """

    @abstractmethod
    def list_all(self) -> list[Booking]: ...

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Booking]: ...

    @abstractmethod
    def get_by_id(self, booking_id: str) -> Booking | None: ...

    @abstractmethod
    def create(self, new_booking: NewBooking) -> Booking: ...

    @abstractmethod
    def update(self, booking_id: str, update: BookingUpdate) -> Booking:
        """
        Raises:
            NotFoundError: If the booking does not exist
        """
        ...

    @abstractmethod
    def delete(self, booking_id: str) -> None: ...

    @abstractmethod
    def get_stats(self) -> BookingStats: ...
