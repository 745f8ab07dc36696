"""Get car by ID use case."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from rentacar.domain.car import Car
from rentacar.domain.errors import NotFoundError, ValidationError
from rentacar.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class GetCarByIdRequest:
    """Request to get a car by ID."""

    car_id: str


@dataclass(frozen=True, slots=True)
class GetCarByIdResponse:
    """Response containing the requested car."""

    car: Car


def validate_car_id(car_id: str) -> None:
    """
    Raises:
        ValidationError: If car_id is not a valid UUID
    """
    try:
        UUID(car_id)
    except ValueError:
        raise ValidationError(
            errors=[
                {
                    "field": "car_id",
                    "message": "Must be a valid UUID format",
                    "code": "INVALID_UUID",
                }
            ]
        )


class GetCarById:
    """
    Use case for retrieving a single car by ID.

    Responsibilities:
    - Validate car_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if car doesn't exist
    """

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, request: GetCarByIdRequest) -> GetCarByIdResponse:
        """
        Execute the get car by ID use case.

        Raises:
            ValidationError: If car_id is not a valid UUID format
            NotFoundError: If car with given ID doesn't exist
        """
        validate_car_id(request.car_id)

        car = self._repository.get_by_id(request.car_id)

        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        return GetCarByIdResponse(car=car)
