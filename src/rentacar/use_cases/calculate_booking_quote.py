from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from rentacar.domain.errors import NotFoundError
from rentacar.domain.pricing import BookingQuote, quote_booking
from rentacar.ports.car_repository import CarRepository
from rentacar.ports.settings_repository import SettingsRepository
from rentacar.use_cases.get_site_settings import GetSiteSettings


@dataclass(frozen=True, slots=True)
class BookingQuoteRequest:
    car_id: str
    start_date: date
    end_date: date
    with_driver: bool = False


class CalculateBookingQuote:
    """
    Price a prospective booking for a catalog car.

    Pricing policy:
    - Daily rate comes from the car record
    - Driver rate comes from site settings (defaults when none are stored)
    - All figures are whole rupiah computed with integer arithmetic
    - A zero-day range returns an all-zero quote rather than failing;
      booking creation is where a zero-day range is rejected
    """

    def __init__(
        self,
        car_repository: CarRepository,
        settings_repository: SettingsRepository,
    ) -> None:
        self._cars = car_repository
        self._settings = GetSiteSettings(settings_repository)

    def execute(self, request: BookingQuoteRequest) -> BookingQuote:
        """
        Raises:
            NotFoundError: If the car doesn't exist
            ValidationError: If the dates mix date and datetime values
        """
        car = self._cars.get_by_id(request.car_id)
        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        settings = self._settings.execute()

        return quote_booking(
            start=request.start_date,
            end=request.end_date,
            price_per_day=car.price_per_day,
            with_driver=request.with_driver,
            driver_daily_rate=settings.driver_fee_per_day,
        )
