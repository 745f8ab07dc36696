"""SQLAlchemy implementation of LocationRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from rentacar.adapters.sqlalchemy_errors import parse_uuid, storage_call
from rentacar.domain.errors import NotFoundError
from rentacar.domain.location import Location
from rentacar.infra.db.models.location import LocationRow
from rentacar.ports.location_repository import LocationRepository


class SqlAlchemyLocationRepository(LocationRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Location]:
        query = select(LocationRow).order_by(LocationRow.name)
        with storage_call("locations.list_all"):
            rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def create(self, location: Location) -> Location:
        row = LocationRow(
            name=location.name,
            city=location.city,
            address=location.address,
            phone=location.phone,
        )
        with storage_call("locations.create"):
            self._session.add(row)
            self._session.flush()
        return self._to_domain(row)

    def update(self, location: Location) -> Location:
        row = self._get_row(location.id)
        if row is None:
            raise NotFoundError(resource="Location", identifier=location.id)
        row.name = location.name
        row.city = location.city
        row.address = location.address
        row.phone = location.phone
        with storage_call("locations.update"):
            self._session.flush()
        return self._to_domain(row)

    def delete(self, location_id: str) -> None:
        row = self._get_row(location_id)
        if row is None:
            return
        with storage_call("locations.delete"):
            self._session.delete(row)
            self._session.flush()

    def _get_row(self, location_id: str) -> LocationRow | None:
        key = parse_uuid(location_id)
        if key is None:
            return None
        with storage_call("locations.get"):
            return self._session.get(LocationRow, key)

    @staticmethod
    def _to_domain(row: LocationRow) -> Location:
        return Location(
            id=str(row.id),
            name=row.name,
            city=row.city,
            address=row.address,
            phone=row.phone,
        )
