"""
Test suite for the SQLAlchemy repositories.

Runs every repository against an in-memory SQLite database built from the
ORM metadata. Tests verify:
- Rows convert to domain records (UUID → string, JSON → tuples)
- Ordering and joins match the in-memory implementations
- Storage failures surface as PersistenceError
"""

from __future__ import annotations

import uuid
from datetime import date, datetime, timedelta, timezone
from typing import Iterator
from unittest.mock import Mock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from conftest import make_car
from rentacar.adapters.sqlalchemy_booking_repository import SqlAlchemyBookingRepository
from rentacar.adapters.sqlalchemy_car_repository import SqlAlchemyCarRepository
from rentacar.adapters.sqlalchemy_favorite_repository import SqlAlchemyFavoriteRepository
from rentacar.adapters.sqlalchemy_location_repository import SqlAlchemyLocationRepository
from rentacar.adapters.sqlalchemy_settings_repository import SqlAlchemySettingsRepository
from rentacar.adapters.sqlalchemy_user_repository import SqlAlchemyUserRepository
from rentacar.domain.booking import BookingStatus, BookingUpdate, NewBooking, PaymentStatus
from rentacar.domain.errors import NotFoundError, PersistenceError
from rentacar.domain.location import Location
from rentacar.domain.settings import SiteSettings
from rentacar.domain.user import NewUser, Role, UserUpdate
from rentacar.infra.db.models import Base, CarRow


@pytest.fixture()
def session() -> Iterator[Session]:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture()
def cars(session: Session) -> SqlAlchemyCarRepository:
    return SqlAlchemyCarRepository(session)


@pytest.fixture()
def users(session: Session) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(session)


def new_user(email: str = "budi@example.com") -> NewUser:
    return NewUser(email=email, password_hash="hashed", name="Budi Santoso", phone="0812")


def new_booking(user_id: str, car_id: str, total_price: int = 1_000_000) -> NewBooking:
    return NewBooking(
        user_id=user_id,
        car_id=car_id,
        start_date=date(2024, 5, 1),
        end_date=date(2024, 5, 3),
        days=2,
        subtotal=total_price,
        driver_fee=0,
        total_price=total_price,
    )


# ==============================================================================
# Cars
# ==============================================================================


def test_car_create_assigns_id_and_round_trips(cars: SqlAlchemyCarRepository) -> None:
    created = cars.create(make_car(id="", images=("a.jpg",), features=("AC", "GPS")))

    assert uuid.UUID(created.id)
    stored = cars.get_by_id(created.id)
    assert stored is not None
    assert stored.images == ("a.jpg",)
    assert stored.features == ("AC", "GPS")
    assert stored.price_per_day == 500_000


def test_car_list_is_newest_first(session: Session, cars: SqlAlchemyCarRepository) -> None:
    now = datetime.now(timezone.utc)
    for offset, name in enumerate(["Oldest", "Middle", "Newest"]):
        session.add(
            CarRow(
                name=name,
                brand="Toyota",
                type="MPV",
                year=2022,
                transmission="Automatic",
                fuel="Bensin",
                seats=7,
                price_per_day=400_000,
                created_at=now + timedelta(minutes=offset),
            )
        )
    session.flush()

    assert [car.name for car in cars.list_all()] == ["Newest", "Middle", "Oldest"]


def test_car_featured_skips_unavailable(cars: SqlAlchemyCarRepository) -> None:
    cars.create(make_car(id="", name="Shown", featured=True))
    cars.create(make_car(id="", name="Rented out", featured=True, available=False))
    cars.create(make_car(id="", name="Regular"))

    assert [car.name for car in cars.get_featured(limit=6)] == ["Shown"]


def test_car_update_and_delete(cars: SqlAlchemyCarRepository) -> None:
    created = cars.create(make_car(id=""))

    updated = cars.update(make_car(id=created.id, price_per_day=650_000))
    assert updated.price_per_day == 650_000

    cars.delete(created.id)
    assert cars.get_by_id(created.id) is None


def test_car_update_missing_is_not_found(cars: SqlAlchemyCarRepository) -> None:
    with pytest.raises(NotFoundError):
        cars.update(make_car(id=str(uuid.uuid4())))


def test_malformed_id_is_simply_absent(cars: SqlAlchemyCarRepository) -> None:
    assert cars.get_by_id("not-a-uuid") is None


# ==============================================================================
# Users
# ==============================================================================


def test_user_get_by_email_carries_credential_separately(users: SqlAlchemyUserRepository) -> None:
    created = users.create(new_user())

    account = users.get_by_email("budi@example.com")

    assert account is not None
    assert account.user == created
    assert account.password_hash == "hashed"
    assert "password_hash" not in account.user.to_dict()


def test_user_timestamps_read_back_as_utc(session: Session, users: SqlAlchemyUserRepository) -> None:
    created = users.create(new_user())
    session.commit()
    session.expire_all()

    account = users.get_by_email("budi@example.com")

    assert account is not None
    assert account.user.created_at is not None
    assert account.user.created_at.tzinfo == timezone.utc
    assert account.user == created


def test_user_update_role_and_active(users: SqlAlchemyUserRepository) -> None:
    created = users.create(new_user())

    updated = users.update(created.id, UserUpdate(role=Role.ADMIN, is_active=False))

    assert updated.role == Role.ADMIN
    assert not updated.is_active


def test_user_duplicate_email_is_persistence_error(users: SqlAlchemyUserRepository) -> None:
    users.create(new_user())

    with pytest.raises(PersistenceError):
        users.create(new_user())


# ==============================================================================
# Bookings
# ==============================================================================


def test_booking_create_and_joins(
    session: Session, cars: SqlAlchemyCarRepository, users: SqlAlchemyUserRepository
) -> None:
    car = cars.create(make_car(id=""))
    user = users.create(new_user())
    bookings = SqlAlchemyBookingRepository(session)

    created = bookings.create(new_booking(user.id, car.id))

    assert created.status == BookingStatus.PENDING
    assert created.payment_status == PaymentStatus.UNPAID

    own = bookings.list_for_user(user.id)
    assert [b.id for b in own] == [created.id]
    assert own[0].car is not None and own[0].car.name == "Toyota Avanza"
    assert own[0].user is None

    listed = bookings.list_all()
    assert listed[0].user is not None and listed[0].user.email == "budi@example.com"


def test_booking_update_and_stats(
    session: Session, cars: SqlAlchemyCarRepository, users: SqlAlchemyUserRepository
) -> None:
    car = cars.create(make_car(id=""))
    user = users.create(new_user())
    bookings = SqlAlchemyBookingRepository(session)
    kept = bookings.create(new_booking(user.id, car.id, total_price=1_000_000))
    dropped = bookings.create(new_booking(user.id, car.id, total_price=700_000))

    bookings.update(kept.id, BookingUpdate(status=BookingStatus.CONFIRMED, payment_status=PaymentStatus.PAID))
    bookings.update(dropped.id, BookingUpdate(status=BookingStatus.CANCELLED))

    stats = bookings.get_stats()
    assert stats.total == 2
    assert stats.confirmed == 1
    assert stats.cancelled == 1
    assert stats.revenue == 1_000_000


def test_booking_update_missing_is_not_found(session: Session) -> None:
    with pytest.raises(NotFoundError):
        SqlAlchemyBookingRepository(session).update(str(uuid.uuid4()), BookingUpdate(status=BookingStatus.CONFIRMED))


def test_empty_stats(session: Session) -> None:
    stats = SqlAlchemyBookingRepository(session).get_stats()

    assert stats.total == 0
    assert stats.revenue == 0


# ==============================================================================
# Favorites
# ==============================================================================


def test_favorite_pair_is_stored_once(
    session: Session, cars: SqlAlchemyCarRepository, users: SqlAlchemyUserRepository
) -> None:
    car = cars.create(make_car(id=""))
    user = users.create(new_user())
    favorites = SqlAlchemyFavoriteRepository(session)

    favorites.add(user.id, car.id)
    favorites.add(user.id, car.id)

    listed = favorites.list_for_user(user.id)
    assert [f.car_id for f in listed] == [car.id]
    assert listed[0].car is not None


def test_favorite_toggle_flips_stored_state(
    session: Session, cars: SqlAlchemyCarRepository, users: SqlAlchemyUserRepository
) -> None:
    car = cars.create(make_car(id=""))
    user = users.create(new_user())
    favorites = SqlAlchemyFavoriteRepository(session)

    assert favorites.toggle(user.id, car.id) is True
    assert favorites.toggle(user.id, car.id) is False
    assert not favorites.exists(user.id, car.id)


# ==============================================================================
# Locations and settings
# ==============================================================================


def test_locations_are_listed_by_name(session: Session) -> None:
    locations = SqlAlchemyLocationRepository(session)
    locations.create(Location(id="", name="Surabaya", city="Surabaya"))
    bandung = locations.create(Location(id="", name="Bandung", city="Bandung"))

    locations.update(Location(id=bandung.id, name="Bandung", city="Bandung", phone="022"))

    listed = locations.list_all()
    assert [location.name for location in listed] == ["Bandung", "Surabaya"]
    assert listed[0].phone == "022"


def test_settings_upsert(session: Session) -> None:
    settings = SqlAlchemySettingsRepository(session)
    assert settings.get() is None

    settings.update(SiteSettings(site_name="Sewa Bali"))
    saved = settings.update(SiteSettings(site_name="Sewa Bali", driver_fee_per_day=175_000))

    assert saved.driver_fee_per_day == 175_000
    assert settings.get() == saved


# ==============================================================================
# Failures
# ==============================================================================


def test_storage_failure_is_persistence_error() -> None:
    session = Mock(spec=Session)
    session.execute.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))

    with pytest.raises(PersistenceError) as exc_info:
        SqlAlchemyCarRepository(session).list_all()

    assert exc_info.value.context["operation"] == "cars.list_all"
