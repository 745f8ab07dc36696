"""Session/identity state for one client context."""

from __future__ import annotations

import logging
from enum import Enum

from rentacar.domain.errors import PersistenceError, UnauthorizedError
from rentacar.domain.user import User
from rentacar.ports.identity_store import IdentityStore
from rentacar.ports.user_repository import UserRepository
from rentacar.use_cases.authenticate_user import AuthenticateUser, LoginRequest
from rentacar.use_cases.authorization import require_admin
from rentacar.use_cases.register_user import RegisterUser, RegistrationRequest
from rentacar.use_cases.update_profile import ProfileChanges, UpdateProfile

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"


class SessionManager:
    """
    Owns the current identity of a client context.

    - At most one identity is active; login replaces it, logout clears it
    - A failed login or registration restores the previous state
    - The identity store is a convenience cache: it is written after every
      identity change, but authorization always re-reads the user store
    """

    def __init__(self, user_repository: UserRepository, identity_store: IdentityStore) -> None:
        self._users = user_repository
        self._store = identity_store
        self._authenticate = AuthenticateUser(user_repository)
        self._register = RegisterUser(user_repository)
        self._update_profile = UpdateProfile(user_repository)
        self._user: User | None = None
        self._state = SessionState.ANONYMOUS

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def current_user(self) -> User | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._state == SessionState.AUTHENTICATED

    def initialize(self) -> User | None:
        """Rehydrate the identity saved by a previous run, if any."""
        try:
            user = self._store.load()
        except PersistenceError:
            logger.warning("Could not read cached identity, starting anonymous")
            user = None

        self._set_identity(user)
        return user

    def login(self, email: str, password: str) -> User:
        """
        Raises:
            NotFoundError: If no account uses the email
            InvalidCredentialError: If the password does not match
            InactiveAccountError: If the account has been deactivated
        """
        previous_user, previous_state = self._user, self._state
        self._state = SessionState.AUTHENTICATING
        try:
            user = self._authenticate.execute(LoginRequest(email=email, password=password))
        except Exception:
            self._user, self._state = previous_user, previous_state
            raise

        self._remember(user)
        logger.info("User logged in", extra={"user_id": user.id})
        return user

    def register(self, request: RegistrationRequest) -> User:
        """
        Create an account and log into it.

        Raises:
            ValidationError: If the profile is incomplete
            DuplicateEmailError: If the email is already registered
        """
        previous_user, previous_state = self._user, self._state
        self._state = SessionState.AUTHENTICATING
        try:
            user = self._register.execute(request)
        except Exception:
            self._user, self._state = previous_user, previous_state
            raise

        self._remember(user)
        logger.info("User registered and logged in", extra={"user_id": user.id})
        return user

    def logout(self) -> None:
        """Always ends anonymous, even if the cached identity cannot be removed."""
        user_id = self._user.id if self._user else None
        try:
            self._store.clear()
        except PersistenceError:
            logger.warning("Could not clear cached identity", extra={"user_id": user_id})

        self._set_identity(None)
        logger.info("User logged out", extra={"user_id": user_id})

    def update_profile(self, changes: ProfileChanges) -> User:
        """
        Raises:
            UnauthorizedError: If nobody is logged in
            ValidationError: If a changed field is invalid
        """
        user = self.require_user()
        updated = self._update_profile.execute(user.id, changes)
        self._remember(updated)
        return updated

    def refresh(self) -> User | None:
        """
        Re-read the current identity from the user store.

        A deleted or deactivated account ends the session.
        """
        if self._user is None:
            return None

        user = self._users.get_by_id(self._user.id)
        if user is None or not user.is_active:
            logger.info("Session account no longer valid", extra={"user_id": self._user.id})
            self.logout()
            return None

        self._remember(user)
        return user

    def require_user(self) -> User:
        """
        Raises:
            UnauthorizedError: If nobody is logged in
        """
        if self._user is None or self._state != SessionState.AUTHENTICATED:
            raise UnauthorizedError("Please log in first")
        return self._user

    def verify_admin(self) -> User:
        """
        Current user, re-verified as an active administrator against the user store.

        Raises:
            UnauthorizedError: If nobody is logged in or the account is gone
            ForbiddenError: If the account is not an administrator
        """
        user = self.require_user()
        return require_admin(self._users, user.id)

    def _remember(self, user: User) -> None:
        self._set_identity(user)
        try:
            self._store.save(user)
        except PersistenceError:
            logger.warning("Could not cache identity", extra={"user_id": user.id})

    def _set_identity(self, user: User | None) -> None:
        self._user = user
        self._state = SessionState.AUTHENTICATED if user else SessionState.ANONYMOUS
