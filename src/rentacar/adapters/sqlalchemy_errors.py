from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

from rentacar.domain.errors import PersistenceError

logger = logging.getLogger(__name__)


@contextmanager
def storage_call(operation: str) -> Iterator[None]:
    """Raise any SQLAlchemy failure inside the block as PersistenceError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(
            "Storage call failed",
            exc_info=exc,
            extra={"operation": operation, "error_type": type(exc).__name__},
        )
        raise PersistenceError(operation) from exc


def parse_uuid(value: str) -> uuid.UUID | None:
    """UUID for a domain id, or None when the id cannot exist in storage."""
    try:
        return uuid.UUID(value)
    except (TypeError, ValueError):
        return None


def as_utc(value: datetime | None) -> datetime | None:
    """Timestamps are stored in UTC; SQLite hands them back without a tzinfo."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)
