from __future__ import annotations

from rentacar.domain.settings import SiteSettings
from rentacar.ports.settings_repository import SettingsRepository


class InMemorySettingsRepository(SettingsRepository):
    def __init__(self, settings: SiteSettings | None = None) -> None:
        self._settings = settings

    def get(self) -> SiteSettings | None:
        return self._settings

    def update(self, settings: SiteSettings) -> SiteSettings:
        self._settings = settings
        return settings
