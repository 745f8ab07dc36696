"""Shared builders for domain records."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import pytest
from werkzeug.security import generate_password_hash

from rentacar.domain.car import Car, CarType
from rentacar.domain.user import Role, User, UserAccount

CAR_ID = "550e8400-e29b-41d4-a716-446655440000"
USER_ID = "7a1e4d5c-0b7f-4a8e-9c43-2f2f0c1d9e01"
ADMIN_ID = "0d3c9a52-8f7e-4b61-a5d2-6c1e9b0f4a77"

_BASE_CAR = Car(
    id=CAR_ID,
    name="Toyota Avanza",
    brand="Toyota",
    type=CarType.MPV,
    year=2022,
    price_per_day=500_000,
    seats=7,
    rating=4.5,
    reviews=10,
    location="Jakarta",
)


def make_car(**overrides: Any) -> Car:
    return replace(_BASE_CAR, **overrides)


def make_account(
    user_id: str = USER_ID,
    email: str = "budi@example.com",
    password: str = "rahasia123",
    role: Role = Role.USER,
    is_active: bool = True,
) -> UserAccount:
    user = User(id=user_id, email=email, name="Budi Santoso", role=role, is_active=is_active)
    return UserAccount(user=user, password_hash=generate_password_hash(password))


@pytest.fixture()
def car() -> Car:
    return make_car()


@pytest.fixture()
def account() -> UserAccount:
    return make_account()


@pytest.fixture()
def admin_account() -> UserAccount:
    return make_account(user_id=ADMIN_ID, email="admin@rentacar.id", password="admin123", role=Role.ADMIN)
