"""Validation and serialization of car, user, location and settings records."""

from __future__ import annotations

import pytest

from conftest import make_car
from rentacar.domain.errors import ValidationError
from rentacar.domain.location import Location
from rentacar.domain.settings import SiteSettings
from rentacar.domain.user import Role, User, UserUpdate, default_avatar


class TestCarValidation:
    def test_valid_car_passes(self) -> None:
        make_car().validate()

    def test_collects_one_error_per_field(self) -> None:
        car = make_car(name=" ", price_per_day=0, seats=0, rating=6.0)

        with pytest.raises(ValidationError) as exc_info:
            car.validate()

        fields = {error["field"] for error in exc_info.value.errors or []}
        assert fields == {"name", "price_per_day", "seats", "rating"}

    def test_rejects_float_money(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_car(price_per_week=3_000_000.0).validate()

        assert exc_info.value.errors == [{"field": "price_per_week", "message": "Must be a non-negative integer"}]

    def test_zero_weekly_and_monthly_prices_are_allowed(self) -> None:
        make_car(price_per_week=0, price_per_month=0).validate()


class TestUser:
    def test_round_trips_through_dict_without_credential(self) -> None:
        user = User(id="u-1", email="budi@example.com", name="Budi", role=Role.ADMIN)

        data = user.to_dict()

        assert "password" not in data
        assert "password_hash" not in data
        assert User.from_dict(data) == user

    def test_from_dict_ignores_unknown_keys(self) -> None:
        user = User.from_dict({"id": "u-1", "email": "a@b.c", "name": "A", "theme": "dark"})

        assert user.role == Role.USER
        assert user.is_active

    def test_default_avatar_is_derived_from_email(self) -> None:
        assert default_avatar("budi@example.com") == "https://i.pravatar.cc/100?u=budi@example.com"

    def test_user_update_changes_skip_unset_fields(self) -> None:
        update = UserUpdate(name="Budi", is_active=False)

        assert update.changes() == {"name": "Budi", "is_active": False}


class TestLocation:
    def test_requires_name_and_city(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Location(id="l-1", name="", city=" ").validate()

        assert [error["field"] for error in exc_info.value.errors or []] == ["name", "city"]


class TestSiteSettings:
    def test_defaults_are_valid(self) -> None:
        settings = SiteSettings()

        settings.validate()
        assert settings.driver_fee_per_day == 150_000

    def test_max_rental_days_below_min_is_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SiteSettings(min_rental_days=5, max_rental_days=3).validate()

        assert exc_info.value.errors[0]["field"] == "max_rental_days"  # type: ignore[index]

    def test_float_driver_fee_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SiteSettings(driver_fee_per_day=150_000.5).validate()  # type: ignore[arg-type]
