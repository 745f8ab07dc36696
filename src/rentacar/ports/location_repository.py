from __future__ import annotations

from abc import ABC, abstractmethod

from rentacar.domain.location import Location


class LocationRepository(ABC):
    @abstractmethod
    def list_all(self) -> list[Location]:
        """All locations ordered by name."""
        ...

    @abstractmethod
    def create(self, location: Location) -> Location: ...

    @abstractmethod
    def update(self, location: Location) -> Location: ...

    @abstractmethod
    def delete(self, location_id: str) -> None: ...
