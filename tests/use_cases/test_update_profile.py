"""Tests for self-service and administrator profile updates."""

from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from conftest import ADMIN_ID, USER_ID, make_account
from rentacar.adapters.in_memory_user_repository import InMemoryUserRepository
from rentacar.domain.errors import ForbiddenError, UnauthorizedError, ValidationError
from rentacar.domain.user import Role, UserUpdate
from rentacar.use_cases.update_profile import AdminUpdateUser, ProfileChanges, UpdateProfile


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository(
        [make_account(), make_account(user_id=ADMIN_ID, email="admin@rentacar.id", role=Role.ADMIN)]
    )


def test_updates_name_and_phone(users: InMemoryUserRepository) -> None:
    user = UpdateProfile(users).execute(USER_ID, ProfileChanges(name=" Budi S. ", phone="0813"))

    assert user.name == "Budi S."
    assert user.phone == "0813"
    assert user.role == Role.USER


def test_changing_password_rehashes(users: InMemoryUserRepository) -> None:
    UpdateProfile(users).execute(USER_ID, ProfileChanges(password="baru12345"))

    account = users.get_by_email("budi@example.com")
    assert account is not None
    assert check_password_hash(account.password_hash, "baru12345")


def test_short_password_is_rejected(users: InMemoryUserRepository) -> None:
    with pytest.raises(ValidationError):
        UpdateProfile(users).execute(USER_ID, ProfileChanges(password="123"))


def test_deleted_user_cannot_update(users: InMemoryUserRepository) -> None:
    users.delete(USER_ID)

    with pytest.raises(UnauthorizedError):
        UpdateProfile(users).execute(USER_ID, ProfileChanges(name="Ghost"))


def test_admin_can_deactivate_user(users: InMemoryUserRepository) -> None:
    user = AdminUpdateUser(users).execute(ADMIN_ID, USER_ID, UserUpdate(is_active=False))

    assert not user.is_active


def test_regular_user_cannot_use_admin_update(users: InMemoryUserRepository) -> None:
    with pytest.raises(ForbiddenError):
        AdminUpdateUser(users).execute(USER_ID, USER_ID, UserUpdate(role=Role.ADMIN))

    assert users.get_by_id(USER_ID).role == Role.USER  # type: ignore[union-attr]


def test_admin_update_cannot_set_password(users: InMemoryUserRepository) -> None:
    with pytest.raises(ValidationError):
        AdminUpdateUser(users).execute(ADMIN_ID, USER_ID, UserUpdate(password_hash="plain"))
