from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import generate_password_hash

from rentacar.domain.errors import ValidationError
from rentacar.domain.user import User, UserUpdate
from rentacar.ports.user_repository import UserRepository
from rentacar.use_cases.authorization import load_actor, require_admin
from rentacar.use_cases.register_user import MIN_PASSWORD_LENGTH


@dataclass(frozen=True, slots=True)
class ProfileChanges:
    """Fields a user may change on their own profile."""

    name: str | None = None
    phone: str | None = None
    avatar: str | None = None
    password: str | None = None

    def __repr__(self) -> str:
        return f"ProfileChanges(name={self.name!r}, phone={self.phone!r}, avatar={self.avatar!r})"


class UpdateProfile:
    """Self-service profile update; role and active flag are not reachable from here."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._repository = user_repository

    def execute(self, user_id: str, changes: ProfileChanges) -> User:
        """
        Raises:
            UnauthorizedError: If the account no longer exists
            ValidationError: If a changed field is invalid
        """
        load_actor(self._repository, user_id)

        if changes.name is not None and not changes.name.strip():
            raise ValidationError(errors=[{"field": "name", "message": "Must not be empty"}])

        password_hash = None
        if changes.password is not None:
            if len(changes.password) < MIN_PASSWORD_LENGTH:
                raise ValidationError(
                    errors=[
                        {
                            "field": "password",
                            "message": f"Must be at least {MIN_PASSWORD_LENGTH} characters",
                        }
                    ]
                )
            password_hash = generate_password_hash(changes.password)

        return self._repository.update(
            user_id,
            UserUpdate(
                name=changes.name.strip() if changes.name is not None else None,
                phone=changes.phone,
                avatar=changes.avatar,
                password_hash=password_hash,
            ),
        )


class AdminUpdateUser:
    """Administrator edit of any account, including role and active flag."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._repository = user_repository

    def execute(self, actor_id: str, user_id: str, update: UserUpdate) -> User:
        require_admin(self._repository, actor_id)
        if update.password_hash is not None:
            raise ValidationError("Administrators cannot set passwords")
        return self._repository.update(user_id, update)
