from __future__ import annotations

from abc import ABC, abstractmethod

from rentacar.domain.user import User


class IdentityStore(ABC):
    """
    Durable client-side cache of the current redacted identity.

    A convenience cache only: authorization decisions re-read the user store.
    """

    @abstractmethod
    def load(self) -> User | None: ...

    @abstractmethod
    def save(self, user: User) -> None: ...

    @abstractmethod
    def clear(self) -> None: ...
