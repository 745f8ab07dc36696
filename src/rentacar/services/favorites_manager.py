from __future__ import annotations

import logging

from rentacar.ports.car_repository import CarRepository
from rentacar.ports.favorite_repository import FavoriteRepository
from rentacar.services.session_manager import SessionManager
from rentacar.use_cases.toggle_favorite import ToggleFavorite, ToggleFavoriteRequest

logger = logging.getLogger(__name__)


class FavoritesManager:
    """Owns the set of car ids the current user has favorited."""

    def __init__(
        self,
        session: SessionManager,
        favorite_repository: FavoriteRepository,
        car_repository: CarRepository,
    ) -> None:
        self._session = session
        self._repository = favorite_repository
        self._toggle = ToggleFavorite(favorite_repository, car_repository)
        self._car_ids: list[str] = []
        self._owner_id: str | None = None

    def load(self) -> list[str]:
        user = self._session.require_user()
        car_ids = [favorite.car_id for favorite in self._repository.list_for_user(user.id)]
        self.apply_loaded(user.id, car_ids)
        return car_ids

    def apply_loaded(self, user_id: str, car_ids: list[str]) -> None:
        current = self._session.current_user
        if current is None or current.id != user_id:
            logger.debug("Dropping favorites fetched for a previous identity", extra={"user_id": user_id})
            return
        self._car_ids = list(dict.fromkeys(car_ids))
        self._owner_id = user_id

    def reset(self) -> None:
        self._car_ids = []
        self._owner_id = None

    def toggle(self, car_id: str) -> bool:
        """
        Flip the favorite and reconcile the cache to the stored result.

        Returns:
            True if the car is now favorited

        Raises:
            UnauthorizedError: If nobody is logged in
            NotFoundError: If favoriting a car that doesn't exist
        """
        user = self._session.require_user()
        favorited = self._toggle.execute(ToggleFavoriteRequest(user_id=user.id, car_id=car_id))

        if self._owner_id != user.id:
            self._car_ids = []
            self._owner_id = user.id
        if favorited and car_id not in self._car_ids:
            self._car_ids.append(car_id)
        elif not favorited:
            self._car_ids = [cached for cached in self._car_ids if cached != car_id]
        return favorited

    def is_favorite(self, car_id: str) -> bool:
        return car_id in self._cached_ids()

    def list(self) -> list[str]:
        return list(self._cached_ids())

    def _cached_ids(self) -> list[str]:
        # Never expose a previous identity's favorites
        current = self._session.current_user
        if current is None or current.id != self._owner_id:
            return []
        return self._car_ids
