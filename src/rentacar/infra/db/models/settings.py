from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from rentacar.infra.db.models.base import Base
from rentacar.infra.db.models.car import utcnow

SETTINGS_ROW_ID = 1


class SettingsRow(Base):
    """Single-row table; the record always has id = 1."""

    __tablename__ = "settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=SETTINGS_ROW_ID)
    site_name: Mapped[str] = mapped_column(String(100), nullable=False)
    site_description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    contact_email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    contact_phone: Mapped[str] = mapped_column(String(30), nullable=False, default="")
    contact_address: Mapped[str] = mapped_column(Text, nullable=False, default="")
    driver_fee_per_day: Mapped[int] = mapped_column(Integer, nullable=False)
    min_rental_days: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    max_rental_days: Mapped[int] = mapped_column(Integer, nullable=False, default=30)
    social_facebook: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    social_instagram: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    social_twitter: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
