from __future__ import annotations

from rentacar.domain.user import User
from rentacar.ports.identity_store import IdentityStore


class InMemoryIdentityStore(IdentityStore):
    """Identity cache that lives only as long as the process."""

    def __init__(self, user: User | None = None) -> None:
        self._user = user

    def load(self) -> User | None:
        return self._user

    def save(self, user: User) -> None:
        self._user = user

    def clear(self) -> None:
        self._user = None
