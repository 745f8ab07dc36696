from __future__ import annotations

import os
from pathlib import Path

from rentacar.domain.pricing import DEFAULT_DRIVER_DAILY_RATE


def log_level() -> str:
    return os.getenv("RENTACAR_LOG_LEVEL", "INFO").upper()


def identity_file() -> Path:
    path = os.getenv("RENTACAR_IDENTITY_FILE")
    return Path(path) if path else Path.home() / ".rentacar" / "identity.json"


def image_dir() -> Path:
    return Path(os.getenv("RENTACAR_IMAGE_DIR", "uploads"))


def image_base_url() -> str:
    return os.getenv("RENTACAR_IMAGE_BASE_URL", "/uploads")


def driver_daily_rate() -> int:
    """Driver fee per day used when no settings record has been saved yet."""
    raw = os.getenv("RENTACAR_DRIVER_DAILY_RATE")

    if not raw:
        return DEFAULT_DRIVER_DAILY_RATE

    try:
        rate = int(raw)
    except ValueError:
        raise RuntimeError(f"RENTACAR_DRIVER_DAILY_RATE must be an integer, got {raw!r}")

    if rate < 0:
        raise RuntimeError("RENTACAR_DRIVER_DAILY_RATE must be >= 0")

    return rate
