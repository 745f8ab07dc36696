from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timezone

from rentacar.domain.car import Car
from rentacar.domain.catalog import featured_cars
from rentacar.domain.errors import NotFoundError
from rentacar.ports.car_repository import CarRepository


class InMemoryCarRepository(CarRepository):
    """
    Canonical contract implementation for tests.

    - Seed cars are taken as already ordered newest first
    - New cars are placed at the front
    """

    def __init__(self, cars: list[Car] | None = None) -> None:
        self._cars = list(cars or [])

    def list_all(self) -> list[Car]:
        return list(self._cars)

    def get_by_id(self, car_id: str) -> Car | None:
        return next((car for car in self._cars if car.id == car_id), None)

    def get_featured(self, limit: int = 6) -> list[Car]:
        return featured_cars(self._cars, limit=limit)

    def create(self, car: Car) -> Car:
        stored = replace(car, id=str(uuid.uuid4()), created_at=datetime.now(timezone.utc))
        self._cars.insert(0, stored)
        return stored

    def update(self, car: Car) -> Car:
        index = self._index_of(car.id)
        stored = replace(car, created_at=self._cars[index].created_at)
        self._cars[index] = stored
        return stored

    def delete(self, car_id: str) -> None:
        self._cars = [car for car in self._cars if car.id != car_id]

    def _index_of(self, car_id: str) -> int:
        for index, car in enumerate(self._cars):
            if car.id == car_id:
                return index
        raise NotFoundError(resource="Car", identifier=car_id)
