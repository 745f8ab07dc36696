from __future__ import annotations

from dataclasses import dataclass

from rentacar.domain.car import is_money
from rentacar.domain.errors import ValidationError
from rentacar.domain.pricing import DEFAULT_DRIVER_DAILY_RATE


@dataclass(frozen=True, slots=True)
class SiteSettings:
    """Administrator-managed site configuration (a single record)."""

    site_name: str = "RentACar"
    site_description: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    contact_address: str = ""
    driver_fee_per_day: int = DEFAULT_DRIVER_DAILY_RATE
    min_rental_days: int = 1
    max_rental_days: int = 30
    social_facebook: str = ""
    social_instagram: str = ""
    social_twitter: str = ""

    def validate(self) -> None:
        errors = []
        if not is_money(self.driver_fee_per_day) or self.driver_fee_per_day < 0:
            errors.append({"field": "driver_fee_per_day", "message": "Must be a non-negative integer"})
        if self.min_rental_days < 1:
            errors.append({"field": "min_rental_days", "message": "Must be at least 1"})
        if self.max_rental_days < self.min_rental_days:
            errors.append(
                {"field": "max_rental_days", "message": "Must be greater than or equal to min_rental_days"}
            )
        if errors:
            raise ValidationError(errors=errors)
