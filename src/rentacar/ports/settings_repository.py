from __future__ import annotations

from abc import ABC, abstractmethod

from rentacar.domain.settings import SiteSettings


class SettingsRepository(ABC):
    @abstractmethod
    def get(self) -> SiteSettings | None:
        """The stored settings record, or None before the first save."""
        ...

    @abstractmethod
    def update(self, settings: SiteSettings) -> SiteSettings:
        """Insert or replace the single settings record."""
        ...
