from __future__ import annotations

from dataclasses import dataclass

from rentacar.domain.car import Car
from rentacar.domain.catalog import SIMILAR_LIMIT, similar_cars
from rentacar.domain.errors import NotFoundError
from rentacar.ports.car_repository import CarRepository
from rentacar.use_cases.get_car_by_id import validate_car_id


@dataclass(frozen=True, slots=True)
class GetSimilarCarsRequest:
    car_id: str
    limit: int = SIMILAR_LIMIT


class GetSimilarCars:
    """Cars of the same type as the given one, for the detail page."""

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, request: GetSimilarCarsRequest) -> list[Car]:
        """
        Raises:
            ValidationError: If car_id is not a valid UUID format
            NotFoundError: If the reference car doesn't exist
        """
        validate_car_id(request.car_id)

        car = self._repository.get_by_id(request.car_id)
        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        return similar_cars(car, self._repository.list_all(), limit=request.limit)
