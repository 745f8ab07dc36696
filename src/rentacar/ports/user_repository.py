from __future__ import annotations

from abc import ABC, abstractmethod

from rentacar.domain.user import NewUser, User, UserAccount, UserUpdate


class UserRepository(ABC):
    """
    Port for user accounts.

    Only get_by_email exposes the stored credential (wrapped in UserAccount);
    every other method returns redacted User records.
    """

    @abstractmethod
    def list_all(self) -> list[User]:
        """All users, newest first."""
        ...

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None: ...

    @abstractmethod
    def get_by_email(self, email: str) -> UserAccount | None:
        """Absence is reported as None, not as an error."""
        ...

    @abstractmethod
    def create(self, new_user: NewUser) -> User: ...

    @abstractmethod
    def update(self, user_id: str, update: UserUpdate) -> User:
        """
        Raises:
            NotFoundError: If the user does not exist
        """
        ...

    @abstractmethod
    def delete(self, user_id: str) -> None: ...
