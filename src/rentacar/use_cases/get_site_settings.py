from __future__ import annotations

from rentacar.domain.settings import SiteSettings
from rentacar.infra.config import driver_daily_rate
from rentacar.ports.settings_repository import SettingsRepository


class GetSiteSettings:
    """Stored settings, or defaults (driver rate from the environment) before the first save."""

    def __init__(self, settings_repository: SettingsRepository) -> None:
        self._repository = settings_repository

    def execute(self) -> SiteSettings:
        settings = self._repository.get()
        if settings is None:
            return SiteSettings(driver_fee_per_day=driver_daily_rate())
        return settings
