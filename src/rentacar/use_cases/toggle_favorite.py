from __future__ import annotations

from dataclasses import dataclass

from rentacar.domain.errors import NotFoundError
from rentacar.ports.car_repository import CarRepository
from rentacar.ports.favorite_repository import FavoriteRepository


@dataclass(frozen=True, slots=True)
class ToggleFavoriteRequest:
    user_id: str
    car_id: str


class ToggleFavorite:
    """
    Flip a (user, car) favorite based on the persisted membership.

    Never relies on a cached view: each call reads the stored state first,
    so two toggles always return the pair to where it started.
    """

    def __init__(
        self,
        favorite_repository: FavoriteRepository,
        car_repository: CarRepository,
    ) -> None:
        self._favorites = favorite_repository
        self._cars = car_repository

    def execute(self, request: ToggleFavoriteRequest) -> bool:
        """
        Returns:
            True if the car is now favorited, False otherwise

        Raises:
            NotFoundError: If favoriting a car that doesn't exist
        """
        if not self._favorites.exists(request.user_id, request.car_id):
            if self._cars.get_by_id(request.car_id) is None:
                raise NotFoundError(resource="Car", identifier=request.car_id)
        return self._favorites.toggle(request.user_id, request.car_id)
