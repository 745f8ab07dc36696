from __future__ import annotations

from rentacar.domain.favorite import Favorite
from rentacar.ports.car_repository import CarRepository
from rentacar.ports.favorite_repository import FavoriteRepository


class InMemoryFavoriteRepository(FavoriteRepository):
    """Canonical contract implementation for tests. Pairs are kept in insertion order."""

    def __init__(
        self,
        pairs: list[tuple[str, str]] | None = None,
        cars: CarRepository | None = None,
    ) -> None:
        self._pairs: list[tuple[str, str]] = []
        for user_id, car_id in pairs or []:
            self.add(user_id, car_id)
        self._cars = cars

    def list_for_user(self, user_id: str) -> list[Favorite]:
        return [
            Favorite(
                user_id=owner,
                car_id=car_id,
                car=self._cars.get_by_id(car_id) if self._cars is not None else None,
            )
            for owner, car_id in self._pairs
            if owner == user_id
        ]

    def exists(self, user_id: str, car_id: str) -> bool:
        return (user_id, car_id) in self._pairs

    def add(self, user_id: str, car_id: str) -> None:
        if not self.exists(user_id, car_id):
            self._pairs.append((user_id, car_id))

    def remove(self, user_id: str, car_id: str) -> None:
        self._pairs = [pair for pair in self._pairs if pair != (user_id, car_id)]
