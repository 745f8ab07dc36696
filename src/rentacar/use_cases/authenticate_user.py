from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash

from rentacar.domain.errors import InactiveAccountError, InvalidCredentialError, NotFoundError
from rentacar.domain.user import User
from rentacar.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


@dataclass(frozen=True, slots=True)
class LoginRequest:
    email: str
    password: str

    def __repr__(self) -> str:
        return f"LoginRequest(email={self.email!r}, password=***)"


class AuthenticateUser:
    """
    Check an email/password pair against the stored credential.

    Checks run in order: account exists, password matches, account active.
    The returned user is redacted (no credential).
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._repository = user_repository

    def execute(self, request: LoginRequest) -> User:
        """
        Raises:
            NotFoundError: If no account uses the email
            InvalidCredentialError: If the password does not match
            InactiveAccountError: If the account has been deactivated
        """
        email = normalize_email(request.email)
        account = self._repository.get_by_email(email)

        if account is None:
            logger.info("Login for unknown email")
            raise NotFoundError(resource="Account", identifier=email)

        if not check_password_hash(account.password_hash, request.password):
            logger.info("Login with wrong password", extra={"user_id": account.user.id})
            raise InvalidCredentialError()

        if not account.user.is_active:
            logger.info("Login to inactive account", extra={"user_id": account.user.id})
            raise InactiveAccountError()

        return account.user
