from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from rentacar.domain.errors import ValidationError


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


class CarType(str, Enum):
    SEDAN = "Sedan"
    SUV = "SUV"
    MPV = "MPV"
    HATCHBACK = "Hatchback"
    SPORT = "Sport"
    ELECTRIC = "Electric"


class Transmission(str, Enum):
    AUTOMATIC = "Automatic"
    MANUAL = "Manual"


class FuelType(str, Enum):
    BENSIN = "Bensin"
    DIESEL = "Diesel"
    ELECTRIC = "Electric"
    HYBRID = "Hybrid"


class SortKey(str, Enum):
    POPULAR = "popular"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"
    NEWEST = "newest"


def is_money(value: object) -> bool:
    """Money is a plain int in IDR (no floats, no bools)."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Car:
    id: str
    name: str
    brand: str
    type: CarType
    year: int
    price_per_day: int
    price_per_week: int = 0
    price_per_month: int = 0
    transmission: Transmission = Transmission.AUTOMATIC
    fuel: FuelType = FuelType.BENSIN
    seats: int = 5
    rating: float = 0.0
    reviews: int = 0
    available: bool = True
    featured: bool = False
    images: tuple[str, ...] = ()
    features: tuple[str, ...] = ()
    description: str = ""
    location: str | None = None
    created_at: datetime | None = field(default=None, compare=False)

    def validate(self) -> None:
        """
        Validate a car record before it is stored.

        Weekly and monthly prices may be left at 0 (not offered).

        Raises:
            ValidationError: With one entry per invalid field
        """
        errors: list[dict[str, str]] = []

        if not self.name.strip():
            errors.append({"field": "name", "message": "Must not be empty"})
        if not self.brand.strip():
            errors.append({"field": "brand", "message": "Must not be empty"})
        if not is_money(self.price_per_day) or self.price_per_day <= 0:
            errors.append({"field": "price_per_day", "message": "Must be a positive integer"})
        for name in ("price_per_week", "price_per_month"):
            value = getattr(self, name)
            if not is_money(value) or value < 0:
                errors.append({"field": name, "message": "Must be a non-negative integer"})
        if self.seats < 1:
            errors.append({"field": "seats", "message": "Must be at least 1"})
        if not 0 <= self.rating <= 5:
            errors.append({"field": "rating", "message": "Must be between 0 and 5"})
        if self.reviews < 0:
            errors.append({"field": "reviews", "message": "Must be >= 0"})

        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class CatalogFilters:
    search: str | None = None
    type: str | None = None
    brand: str | None = None
    transmission: str | None = None
    fuel: str | None = None
    min_seats: int | None = None
    price_min: int | None = None
    price_max: int | None = None
    location: str | None = None
    sort: SortKey = SortKey.POPULAR

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # Guardrails: prevent float leakage past boundary
        if self.price_min is not None and not is_money(self.price_min):
            raise FilterValidationError("price_min must be int or None (no floats past the boundary)")
        if self.price_max is not None and not is_money(self.price_max):
            raise FilterValidationError("price_max must be int or None (no floats past the boundary)")

        if self.price_min is not None and self.price_min < 0:
            raise FilterValidationError("price_min must be >= 0")
        if self.price_max is not None and self.price_max < 0:
            raise FilterValidationError("price_max must be >= 0")
        if self.min_seats is not None and self.min_seats < 0:
            raise FilterValidationError("min_seats must be >= 0")
        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise FilterValidationError("price_min cannot be greater than price_max")
        if not isinstance(self.sort, SortKey):
            raise FilterValidationError(f"sort must be one of {[key.value for key in SortKey]}")
