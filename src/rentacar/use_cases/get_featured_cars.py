from __future__ import annotations

from rentacar.domain.car import Car
from rentacar.domain.catalog import FEATURED_LIMIT
from rentacar.domain.errors import ValidationError
from rentacar.ports.car_repository import CarRepository


class GetFeaturedCars:
    """Featured, available cars for the landing page."""

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, limit: int = FEATURED_LIMIT) -> list[Car]:
        if limit <= 0:
            raise ValidationError("limit must be > 0")
        return self._repository.get_featured(limit=limit)
