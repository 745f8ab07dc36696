"""SQLAlchemy implementation of SettingsRepository."""

from __future__ import annotations

from dataclasses import asdict, fields

from sqlalchemy.orm import Session

from rentacar.adapters.sqlalchemy_errors import storage_call
from rentacar.domain.settings import SiteSettings
from rentacar.infra.db.models.settings import SETTINGS_ROW_ID, SettingsRow
from rentacar.ports.settings_repository import SettingsRepository


class SqlAlchemySettingsRepository(SettingsRepository):
    """Upserts the single settings row (id = 1)."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self) -> SiteSettings | None:
        with storage_call("settings.get"):
            row = self._session.get(SettingsRow, SETTINGS_ROW_ID)
        return self._to_domain(row) if row else None

    def update(self, settings: SiteSettings) -> SiteSettings:
        with storage_call("settings.update"):
            row = self._session.get(SettingsRow, SETTINGS_ROW_ID)
            if row is None:
                row = SettingsRow(id=SETTINGS_ROW_ID)
                self._session.add(row)
            for key, value in asdict(settings).items():
                setattr(row, key, value)
            self._session.flush()
        return self._to_domain(row)

    @staticmethod
    def _to_domain(row: SettingsRow) -> SiteSettings:
        return SiteSettings(**{f.name: getattr(row, f.name) for f in fields(SiteSettings)})
