from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import generate_password_hash

from rentacar.domain.errors import DuplicateEmailError, ValidationError
from rentacar.domain.user import NewUser, Role, User, default_avatar
from rentacar.ports.user_repository import UserRepository
from rentacar.use_cases.authenticate_user import normalize_email

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True, slots=True)
class RegistrationRequest:
    email: str
    password: str
    name: str
    phone: str | None = None

    def __repr__(self) -> str:
        return f"RegistrationRequest(email={self.email!r}, name={self.name!r}, password=***)"

    def validate(self) -> None:
        errors = []
        if "@" not in self.email:
            errors.append({"field": "email", "message": "Must be a valid email address"})
        if len(self.password) < MIN_PASSWORD_LENGTH:
            errors.append(
                {"field": "password", "message": f"Must be at least {MIN_PASSWORD_LENGTH} characters"}
            )
        if not self.name.strip():
            errors.append({"field": "name", "message": "Must not be empty"})
        if errors:
            raise ValidationError(errors=errors)


class RegisterUser:
    """
    Create a regular, active user account.

    The duplicate-email lookup completes before the insert is issued.
    The password is stored as a salted hash.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._repository = user_repository

    def execute(self, request: RegistrationRequest) -> User:
        """
        Raises:
            ValidationError: If the profile is incomplete
            DuplicateEmailError: If the email is already registered
        """
        request.validate()
        email = normalize_email(request.email)

        if self._repository.get_by_email(email) is not None:
            raise DuplicateEmailError(email)

        user = self._repository.create(
            NewUser(
                email=email,
                password_hash=generate_password_hash(request.password),
                name=request.name.strip(),
                phone=request.phone,
                role=Role.USER,
                is_active=True,
                avatar=default_avatar(email),
            )
        )

        logger.info("User registered", extra={"user_id": user.id})
        return user
