from __future__ import annotations

from abc import ABC, abstractmethod

from rentacar.domain.car import Car


class CarRepository(ABC):
    """
    Port for car catalog data access.

    Contract:
        - list_all returns newest-created first
        - get_by_id returns None when no car matches (not an error)
        - create ignores the id/created_at of the given car and returns the stored car
        - storage failures raise PersistenceError, never an empty result
    """

    @abstractmethod
    def list_all(self) -> list[Car]: ...

    @abstractmethod
    def get_by_id(self, car_id: str) -> Car | None: ...

    @abstractmethod
    def get_featured(self, limit: int = 6) -> list[Car]:
        """Featured cars that are currently available."""
        ...

    @abstractmethod
    def create(self, car: Car) -> Car: ...

    @abstractmethod
    def update(self, car: Car) -> Car:
        """
        Replace every editable field of the car with the same id.

        Raises:
            NotFoundError: If the car does not exist
        """
        ...

    @abstractmethod
    def delete(self, car_id: str) -> None: ...
