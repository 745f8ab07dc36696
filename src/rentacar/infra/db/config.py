from __future__ import annotations

import os


def database_url() -> str:
    url = os.getenv("RENTACAR_DATABASE_URL") or os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def database_echo() -> bool:
    """Log every SQL statement (RENTACAR_DATABASE_ECHO=1)."""
    return os.getenv("RENTACAR_DATABASE_ECHO", "").lower() in {"1", "true", "yes"}
