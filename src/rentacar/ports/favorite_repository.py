from __future__ import annotations

from abc import ABC, abstractmethod

from rentacar.domain.favorite import Favorite


class FavoriteRepository(ABC):
    """Port for (user, car) favorite pairs. A pair is stored at most once."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Favorite]:
        """Favorites joined with their car records."""
        ...

    @abstractmethod
    def exists(self, user_id: str, car_id: str) -> bool: ...

    @abstractmethod
    def add(self, user_id: str, car_id: str) -> None:
        """Insert the pair; a no-op if it is already stored."""
        ...

    @abstractmethod
    def remove(self, user_id: str, car_id: str) -> None:
        """Delete the pair; a no-op if it is not stored."""
        ...

    def toggle(self, user_id: str, car_id: str) -> bool:
        """
        Flip membership based on the stored state.

        Returns:
            True if the car is now favorited, False otherwise
        """
        if self.exists(user_id, car_id):
            self.remove(user_id, car_id)
            return False
        self.add(user_id, car_id)
        return True
