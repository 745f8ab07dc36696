"""Per-client wiring of session, bookings and favorites."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from rentacar.domain.errors import DomainError
from rentacar.domain.user import User
from rentacar.ports.booking_repository import BookingRepository
from rentacar.ports.car_repository import CarRepository
from rentacar.ports.favorite_repository import FavoriteRepository
from rentacar.ports.identity_store import IdentityStore
from rentacar.ports.settings_repository import SettingsRepository
from rentacar.ports.user_repository import UserRepository
from rentacar.services.booking_manager import BookingManager
from rentacar.services.favorites_manager import FavoritesManager
from rentacar.services.session_manager import SessionManager
from rentacar.use_cases.register_user import RegistrationRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UserDataLoad:
    bookings_loaded: bool
    favorites_loaded: bool
    errors: tuple[DomainError, ...] = ()

    @property
    def partial_failure(self) -> bool:
        return bool(self.errors)


class ClientContext:
    """
    One client's identity plus the per-user caches that depend on it.

    Two contexts never share state; build one per client with ``create``.
    """

    def __init__(
        self,
        session: SessionManager,
        bookings: BookingManager,
        favorites: FavoritesManager,
    ) -> None:
        self.session = session
        self.bookings = bookings
        self.favorites = favorites
        self.last_load: UserDataLoad | None = None

    @classmethod
    def create(
        cls,
        *,
        user_repository: UserRepository,
        car_repository: CarRepository,
        booking_repository: BookingRepository,
        favorite_repository: FavoriteRepository,
        settings_repository: SettingsRepository,
        identity_store: IdentityStore,
    ) -> ClientContext:
        session = SessionManager(user_repository, identity_store)
        return cls(
            session=session,
            bookings=BookingManager(
                session,
                user_repository,
                car_repository,
                booking_repository,
                settings_repository,
            ),
            favorites=FavoritesManager(session, favorite_repository, car_repository),
        )

    def initialize(self) -> UserDataLoad | None:
        """Rehydrate the cached identity and, if there is one, load its data."""
        if self.session.initialize() is None:
            return None
        return self.load_user_data()

    def login(self, email: str, password: str) -> User:
        previous = self.session.current_user
        user = self.session.login(email, password)
        if previous is None or previous.id != user.id:
            self._reset_caches()
        self.load_user_data()
        return user

    def register(self, request: RegistrationRequest) -> User:
        user = self.session.register(request)
        self._reset_caches()
        self.load_user_data()
        return user

    def logout(self) -> None:
        self.session.logout()
        self._reset_caches()
        self.last_load = None

    def refresh(self) -> User | None:
        """
        Re-check the current account against the user store.

        A deleted or deactivated account ends the session and drops its caches.
        """
        user = self.session.refresh()
        if user is None:
            self._reset_caches()
            self.last_load = None
        return user

    def load_user_data(self) -> UserDataLoad:
        """
        Fetch bookings and favorites for the current user.

        Each fetch succeeds or fails on its own; a failed one keeps its
        previous cache and is reported in the result.
        """
        user = self.session.require_user()
        errors: list[DomainError] = []

        bookings_loaded = self._load("bookings", self.bookings.load, user, errors)
        favorites_loaded = self._load("favorites", self.favorites.load, user, errors)

        result = UserDataLoad(
            bookings_loaded=bookings_loaded,
            favorites_loaded=favorites_loaded,
            errors=tuple(errors),
        )
        self.last_load = result
        return result

    @staticmethod
    def _load(kind: str, loader: Callable[[], object], user: User, errors: list[DomainError]) -> bool:
        try:
            loader()
        except DomainError as exc:
            logger.warning(
                "Could not load user data",
                extra={"kind": kind, "user_id": user.id, "error_code": exc.error_code},
            )
            errors.append(exc)
            return False
        return True

    def _reset_caches(self) -> None:
        self.bookings.reset()
        self.favorites.reset()
