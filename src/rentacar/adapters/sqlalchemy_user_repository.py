"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from rentacar.adapters.sqlalchemy_errors import as_utc, parse_uuid, storage_call
from rentacar.domain.errors import NotFoundError
from rentacar.domain.user import NewUser, Role, User, UserAccount, UserUpdate
from rentacar.infra.db.models.user import UserRow
from rentacar.ports.user_repository import UserRepository


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[User]:
        query = select(UserRow).order_by(UserRow.created_at.desc())
        with storage_call("users.list_all"):
            rows = self._session.execute(query).scalars().all()
        return [to_domain_user(row) for row in rows]

    def get_by_id(self, user_id: str) -> User | None:
        row = self._get_row(user_id)
        return to_domain_user(row) if row else None

    def get_by_email(self, email: str) -> UserAccount | None:
        query = select(UserRow).where(UserRow.email == email)
        with storage_call("users.get_by_email"):
            row = self._session.execute(query).scalar_one_or_none()
        if row is None:
            return None
        return UserAccount(user=to_domain_user(row), password_hash=row.password_hash)

    def create(self, new_user: NewUser) -> User:
        row = UserRow(
            email=new_user.email,
            password_hash=new_user.password_hash,
            name=new_user.name,
            phone=new_user.phone,
            role=new_user.role.value,
            is_active=new_user.is_active,
            avatar=new_user.avatar,
        )
        with storage_call("users.create"):
            self._session.add(row)
            self._session.flush()
        return to_domain_user(row)

    def update(self, user_id: str, update: UserUpdate) -> User:
        row = self._get_row(user_id)
        if row is None:
            raise NotFoundError(resource="User", identifier=user_id)

        for field, value in update.changes().items():
            setattr(row, field, value.value if isinstance(value, Role) else value)

        with storage_call("users.update"):
            self._session.flush()
        return to_domain_user(row)

    def delete(self, user_id: str) -> None:
        row = self._get_row(user_id)
        if row is None:
            return
        with storage_call("users.delete"):
            self._session.delete(row)
            self._session.flush()

    def _get_row(self, user_id: str) -> UserRow | None:
        key = parse_uuid(user_id)
        if key is None:
            return None
        with storage_call("users.get_by_id"):
            return self._session.get(UserRow, key)


def to_domain_user(row: UserRow) -> User:
    """Redacted conversion: the password hash never leaves the row."""
    return User(
        id=str(row.id),
        email=row.email,
        name=row.name,
        phone=row.phone,
        role=Role(row.role),
        is_active=row.is_active,
        avatar=row.avatar,
        created_at=as_utc(row.created_at),
    )
