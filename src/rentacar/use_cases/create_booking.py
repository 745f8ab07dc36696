from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from rentacar.domain.booking import Booking, NewBooking
from rentacar.domain.errors import NotFoundError, ValidationError
from rentacar.domain.pricing import quote_booking
from rentacar.ports.booking_repository import BookingRepository
from rentacar.ports.car_repository import CarRepository
from rentacar.ports.settings_repository import SettingsRepository
from rentacar.ports.user_repository import UserRepository
from rentacar.use_cases.authorization import load_actor
from rentacar.use_cases.get_site_settings import GetSiteSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateBookingRequest:
    user_id: str
    car_id: str
    start_date: date
    end_date: date
    with_driver: bool = False
    notes: str | None = None


class CreateBooking:
    """
    Create a booking for the acting user.

    Rules:
    - The user must exist and be active (re-read from the user store)
    - The car must exist and be available
    - The rental must last at least one day and stay within the
      min/max rental days configured in site settings
    - New bookings are always pending and unpaid
    """

    def __init__(
        self,
        user_repository: UserRepository,
        car_repository: CarRepository,
        booking_repository: BookingRepository,
        settings_repository: SettingsRepository,
    ) -> None:
        self._users = user_repository
        self._cars = car_repository
        self._bookings = booking_repository
        self._settings = GetSiteSettings(settings_repository)

    def execute(self, request: CreateBookingRequest) -> Booking:
        """
        Raises:
            UnauthorizedError: If the user no longer exists
            NotFoundError: If the car doesn't exist
            ValidationError: If the car is unavailable or the duration is out of range
            PersistenceError: If the booking could not be stored
        """
        load_actor(self._users, request.user_id)

        car = self._cars.get_by_id(request.car_id)
        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)
        if not car.available:
            raise ValidationError(
                errors=[
                    {
                        "field": "car_id",
                        "message": "Car is not available for booking",
                        "code": "CAR_UNAVAILABLE",
                    }
                ]
            )

        settings = self._settings.execute()
        quote = quote_booking(
            start=request.start_date,
            end=request.end_date,
            price_per_day=car.price_per_day,
            with_driver=request.with_driver,
            driver_daily_rate=settings.driver_fee_per_day,
        )

        if quote.days <= 0:
            raise ValidationError(
                errors=[
                    {
                        "field": "end_date",
                        "message": "Must be after start_date",
                        "code": "INVALID_RANGE",
                    }
                ]
            )
        if not settings.min_rental_days <= quote.days <= settings.max_rental_days:
            raise ValidationError(
                errors=[
                    {
                        "field": "end_date",
                        "message": (
                            f"Rental must last between {settings.min_rental_days} "
                            f"and {settings.max_rental_days} days"
                        ),
                        "code": "INVALID_DURATION",
                    }
                ]
            )

        booking = self._bookings.create(
            NewBooking(
                user_id=request.user_id,
                car_id=car.id,
                start_date=request.start_date,
                end_date=request.end_date,
                days=quote.days,
                subtotal=quote.subtotal,
                driver_fee=quote.driver_fee,
                total_price=quote.total,
                with_driver=request.with_driver,
                notes=request.notes,
            )
        )

        logger.info(
            "Booking created",
            extra={"booking_id": booking.id, "user_id": booking.user_id, "car_id": booking.car_id},
        )
        return booking
