from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any
from urllib.parse import quote

AVATAR_URL_TEMPLATE = "https://i.pravatar.cc/100?u={email}"

# Keys that must never reach a cached or serialized identity
CREDENTIAL_FIELDS = frozenset({"password", "password_hash"})


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True, slots=True)
class User:
    """A redacted identity: every user field except the credential."""

    id: str
    email: str
    name: str
    phone: str | None = None
    role: Role = Role.USER
    is_active: bool = True
    avatar: str | None = None
    created_at: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "phone": self.phone,
            "role": self.role.value,
            "is_active": self.is_active,
            "avatar": self.avatar,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        values["role"] = Role(values.get("role", Role.USER.value))
        if values.get("created_at"):
            values["created_at"] = datetime.fromisoformat(values["created_at"])
        return cls(**values)


@dataclass(frozen=True, slots=True)
class UserAccount:
    """A user together with its stored credential. Never leaves the auth use cases."""

    user: User
    password_hash: str


@dataclass(frozen=True, slots=True)
class NewUser:
    email: str
    password_hash: str
    name: str
    phone: str | None = None
    role: Role = Role.USER
    is_active: bool = True
    avatar: str | None = None


@dataclass(frozen=True, slots=True)
class UserUpdate:
    """Partial update; ``None`` leaves a field unchanged."""

    name: str | None = None
    phone: str | None = None
    avatar: str | None = None
    role: Role | None = None
    is_active: bool | None = None
    password_hash: str | None = None

    def changes(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


def default_avatar(email: str) -> str:
    return AVATAR_URL_TEMPLATE.format(email=quote(email, safe="@"))
