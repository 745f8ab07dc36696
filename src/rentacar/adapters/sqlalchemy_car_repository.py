"""SQLAlchemy implementation of CarRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from rentacar.adapters.sqlalchemy_errors import as_utc, parse_uuid, storage_call
from rentacar.domain.car import Car, CarType, FuelType, Transmission
from rentacar.domain.errors import NotFoundError
from rentacar.infra.db.models.car import CarRow
from rentacar.ports.car_repository import CarRepository


class SqlAlchemyCarRepository(CarRepository):
    """
    SQLAlchemy implementation of CarRepository.

    - Writes are flushed, not committed; the session owner commits
    - Converts CarRow (infrastructure) to Car (domain)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Car]:
        query = select(CarRow).order_by(CarRow.created_at.desc())
        with storage_call("cars.list_all"):
            rows = self._session.execute(query).scalars().all()
        return [to_domain_car(row) for row in rows]

    def get_by_id(self, car_id: str) -> Car | None:
        row = self._get_row(car_id)
        return to_domain_car(row) if row else None

    def get_featured(self, limit: int = 6) -> list[Car]:
        query = (
            select(CarRow)
            .where(CarRow.featured.is_(True), CarRow.available.is_(True))
            .order_by(CarRow.created_at.desc())
            .limit(limit)
        )
        with storage_call("cars.get_featured"):
            rows = self._session.execute(query).scalars().all()
        return [to_domain_car(row) for row in rows]

    def create(self, car: Car) -> Car:
        row = CarRow()
        self._apply(row, car)
        with storage_call("cars.create"):
            self._session.add(row)
            self._session.flush()
        return to_domain_car(row)

    def update(self, car: Car) -> Car:
        row = self._get_row(car.id)
        if row is None:
            raise NotFoundError(resource="Car", identifier=car.id)
        self._apply(row, car)
        with storage_call("cars.update"):
            self._session.flush()
        return to_domain_car(row)

    def delete(self, car_id: str) -> None:
        row = self._get_row(car_id)
        if row is None:
            return
        with storage_call("cars.delete"):
            self._session.delete(row)
            self._session.flush()

    def _get_row(self, car_id: str) -> CarRow | None:
        key = parse_uuid(car_id)
        if key is None:
            return None
        with storage_call("cars.get_by_id"):
            return self._session.get(CarRow, key)

    @staticmethod
    def _apply(row: CarRow, car: Car) -> None:
        row.name = car.name
        row.brand = car.brand
        row.type = car.type.value
        row.year = car.year
        row.transmission = car.transmission.value
        row.fuel = car.fuel.value
        row.seats = car.seats
        row.price_per_day = car.price_per_day
        row.price_per_week = car.price_per_week
        row.price_per_month = car.price_per_month
        row.rating = car.rating
        row.reviews = car.reviews
        row.available = car.available
        row.featured = car.featured
        row.images = list(car.images)
        row.features = list(car.features)
        row.description = car.description
        row.location = car.location


def to_domain_car(row: CarRow) -> Car:
    """Convert database model (CarRow) to domain entity (Car)."""
    return Car(
        id=str(row.id),
        name=row.name,
        brand=row.brand,
        type=CarType(row.type),
        year=row.year,
        price_per_day=row.price_per_day,
        price_per_week=row.price_per_week,
        price_per_month=row.price_per_month,
        transmission=Transmission(row.transmission),
        fuel=FuelType(row.fuel),
        seats=row.seats,
        rating=row.rating,
        reviews=row.reviews,
        available=row.available,
        featured=row.featured,
        images=tuple(row.images or ()),
        features=tuple(row.features or ()),
        description=row.description,
        location=row.location,
        created_at=as_utc(row.created_at),
    )
