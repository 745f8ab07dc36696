from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from rentacar.domain.errors import NotFoundError
from rentacar.domain.user import NewUser, User, UserAccount, UserUpdate
from rentacar.ports.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """Canonical contract implementation for tests. Accounts are kept newest first."""

    def __init__(self, accounts: list[UserAccount] | None = None) -> None:
        self._accounts = list(accounts or [])

    def list_all(self) -> list[User]:
        return [account.user for account in self._accounts]

    def get_by_id(self, user_id: str) -> User | None:
        account = self._find(lambda a: a.user.id == user_id)
        return account.user if account else None

    def get_by_email(self, email: str) -> UserAccount | None:
        return self._find(lambda a: a.user.email == email)

    def create(self, new_user: NewUser) -> User:
        user = User(
            id=str(uuid.uuid4()),
            email=new_user.email,
            name=new_user.name,
            phone=new_user.phone,
            role=new_user.role,
            is_active=new_user.is_active,
            avatar=new_user.avatar,
            created_at=datetime.now(timezone.utc),
        )
        self._accounts.insert(0, UserAccount(user=user, password_hash=new_user.password_hash))
        return user

    def update(self, user_id: str, update: UserUpdate) -> User:
        for index, account in enumerate(self._accounts):
            if account.user.id != user_id:
                continue
            changes = update.changes()
            password_hash = changes.pop("password_hash", account.password_hash)
            user = replace(account.user, **changes)
            self._accounts[index] = UserAccount(user=user, password_hash=password_hash)
            return user
        raise NotFoundError(resource="User", identifier=user_id)

    def delete(self, user_id: str) -> None:
        self._accounts = [a for a in self._accounts if a.user.id != user_id]

    def _find(self, predicate: Callable[[UserAccount], bool]) -> UserAccount | None:
        return next((account for account in self._accounts if predicate(account)), None)
