"""SQLAlchemy implementation of FavoriteRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from rentacar.adapters.sqlalchemy_car_repository import to_domain_car
from rentacar.adapters.sqlalchemy_errors import parse_uuid, storage_call
from rentacar.domain.favorite import Favorite
from rentacar.infra.db.models.favorite import FavoriteRow
from rentacar.ports.favorite_repository import FavoriteRepository


class SqlAlchemyFavoriteRepository(FavoriteRepository):
    """The (user_id, car_id) unique constraint keeps pairs unique at the storage level."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_for_user(self, user_id: str) -> list[Favorite]:
        key = parse_uuid(user_id)
        if key is None:
            return []
        query = (
            select(FavoriteRow)
            .where(FavoriteRow.user_id == key)
            .order_by(FavoriteRow.created_at)
        )
        with storage_call("favorites.list_for_user"):
            rows = self._session.execute(query).unique().scalars().all()
        return [
            Favorite(user_id=str(row.user_id), car_id=str(row.car_id), car=to_domain_car(row.car))
            for row in rows
        ]

    def exists(self, user_id: str, car_id: str) -> bool:
        user_key, car_key = parse_uuid(user_id), parse_uuid(car_id)
        if user_key is None or car_key is None:
            return False
        query = select(FavoriteRow.id).where(
            FavoriteRow.user_id == user_key, FavoriteRow.car_id == car_key
        )
        with storage_call("favorites.exists"):
            return self._session.execute(query).first() is not None

    def add(self, user_id: str, car_id: str) -> None:
        if self.exists(user_id, car_id):
            return
        row = FavoriteRow(user_id=parse_uuid(user_id), car_id=parse_uuid(car_id))
        with storage_call("favorites.add"):
            self._session.add(row)
            self._session.flush()

    def remove(self, user_id: str, car_id: str) -> None:
        user_key, car_key = parse_uuid(user_id), parse_uuid(car_id)
        if user_key is None or car_key is None:
            return
        statement = delete(FavoriteRow).where(
            FavoriteRow.user_id == user_key, FavoriteRow.car_id == car_key
        )
        with storage_call("favorites.remove"):
            self._session.execute(statement)
            self._session.flush()
