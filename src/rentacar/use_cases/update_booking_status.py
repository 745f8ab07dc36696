from __future__ import annotations

import logging
from dataclasses import dataclass

from rentacar.domain.booking import (
    Booking,
    BookingStatus,
    BookingUpdate,
    PaymentStatus,
    can_owner_transition,
    can_transition,
)
from rentacar.domain.errors import ForbiddenError, InvalidTransitionError, NotFoundError
from rentacar.ports.booking_repository import BookingRepository
from rentacar.ports.user_repository import UserRepository
from rentacar.use_cases.authorization import load_actor, require_admin

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateBookingStatusRequest:
    actor_id: str
    booking_id: str
    status: BookingStatus


class UpdateBookingStatus:
    """
    Move a booking through its status lifecycle.

    - Administrators may make any transition the lifecycle table allows
    - A renter may only cancel their own pending booking
    - Another user's booking is reported as not found to non-admins
    """

    def __init__(
        self,
        user_repository: UserRepository,
        booking_repository: BookingRepository,
    ) -> None:
        self._users = user_repository
        self._bookings = booking_repository

    def execute(self, request: UpdateBookingStatusRequest) -> Booking:
        """
        Raises:
            NotFoundError: If the booking doesn't exist (or isn't visible to the actor)
            InvalidTransitionError: If the lifecycle doesn't allow the change
            ForbiddenError: If a renter attempts anything but cancelling a pending booking
        """
        actor = load_actor(self._users, request.actor_id)

        booking = self._bookings.get_by_id(request.booking_id)
        if booking is None or (not actor.is_admin and booking.user_id != actor.id):
            raise NotFoundError(resource="Booking", identifier=request.booking_id)

        if not can_transition(booking.status, request.status):
            raise InvalidTransitionError(
                current=booking.status.value,
                requested=request.status.value,
                booking_id=booking.id,
            )
        if not actor.is_admin and not can_owner_transition(booking.status, request.status):
            raise ForbiddenError(
                "Only a pending booking can be cancelled by its owner",
                booking_id=booking.id,
            )

        updated = self._bookings.update(booking.id, BookingUpdate(status=request.status))

        logger.info(
            "Booking status changed",
            extra={
                "booking_id": booking.id,
                "from_status": booking.status.value,
                "to_status": request.status.value,
                "actor_id": actor.id,
            },
        )
        return updated


@dataclass(frozen=True, slots=True)
class MarkBookingPaidRequest:
    actor_id: str
    booking_id: str


class MarkBookingPaid:
    """Administrators record payment for a booking that has not been cancelled."""

    def __init__(
        self,
        user_repository: UserRepository,
        booking_repository: BookingRepository,
    ) -> None:
        self._users = user_repository
        self._bookings = booking_repository

    def execute(self, request: MarkBookingPaidRequest) -> Booking:
        """
        Raises:
            ForbiddenError: If the actor is not an administrator
            NotFoundError: If the booking doesn't exist
            InvalidTransitionError: If the booking is cancelled or already paid
        """
        require_admin(self._users, request.actor_id)

        booking = self._bookings.get_by_id(request.booking_id)
        if booking is None:
            raise NotFoundError(resource="Booking", identifier=request.booking_id)

        if booking.status == BookingStatus.CANCELLED or booking.payment_status == PaymentStatus.PAID:
            raise InvalidTransitionError(
                current=f"{booking.status.value}/{booking.payment_status.value}",
                requested=PaymentStatus.PAID.value,
                booking_id=booking.id,
            )

        updated = self._bookings.update(booking.id, BookingUpdate(payment_status=PaymentStatus.PAID))
        logger.info("Booking marked paid", extra={"booking_id": booking.id})
        return updated
