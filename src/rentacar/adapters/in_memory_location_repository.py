from __future__ import annotations

import uuid
from dataclasses import replace

from rentacar.domain.errors import NotFoundError
from rentacar.domain.location import Location
from rentacar.ports.location_repository import LocationRepository


class InMemoryLocationRepository(LocationRepository):
    def __init__(self, locations: list[Location] | None = None) -> None:
        self._locations = {location.id: location for location in locations or []}

    def list_all(self) -> list[Location]:
        return sorted(self._locations.values(), key=lambda location: location.name)

    def create(self, location: Location) -> Location:
        stored = replace(location, id=str(uuid.uuid4()))
        self._locations[stored.id] = stored
        return stored

    def update(self, location: Location) -> Location:
        if location.id not in self._locations:
            raise NotFoundError(resource="Location", identifier=location.id)
        self._locations[location.id] = location
        return location

    def delete(self, location_id: str) -> None:
        self._locations.pop(location_id, None)
