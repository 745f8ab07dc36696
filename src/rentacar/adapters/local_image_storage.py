from __future__ import annotations

import logging
import time
from pathlib import Path, PurePosixPath

from rentacar.domain.errors import PersistenceError, ValidationError
from rentacar.ports.image_storage import ImageStorage

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png", "webp", "gif"}


def image_key(filename: str, owner_id: str) -> str:
    """
    Storage path for an upload: ``cars/<owner_id>-<epoch millis>.<ext>``.

    Raises:
        ValidationError: If the file extension is not an allowed image type
    """
    extension = PurePosixPath(filename).suffix.lstrip(".").lower()
    if extension not in ALLOWED_EXTENSIONS:
        raise ValidationError(
            errors=[
                {
                    "field": "filename",
                    "message": f"Must be one of {sorted(ALLOWED_EXTENSIONS)}",
                    "code": "INVALID_IMAGE_TYPE",
                }
            ]
        )
    return f"cars/{owner_id}-{int(time.time() * 1000)}.{extension}"


class LocalImageStorage(ImageStorage):
    """Writes uploads under ``root`` and serves them from ``base_url``."""

    def __init__(self, root: Path | str, base_url: str) -> None:
        self._root = Path(root)
        self._base_url = base_url.rstrip("/")

    def upload(self, filename: str, content: bytes, owner_id: str) -> str:
        key = image_key(filename, owner_id)
        target = self._root / key

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as exc:
            raise PersistenceError("images.upload", path=str(target)) from exc

        logger.info("Stored image", extra={"key": key, "size": len(content)})
        return f"{self._base_url}/{key}"

    def delete(self, url: str) -> None:
        prefix = f"{self._base_url}/"
        if not url.startswith(prefix):
            return
        target = self._root / url[len(prefix):]

        try:
            target.unlink(missing_ok=True)
        except OSError as exc:
            raise PersistenceError("images.delete", path=str(target)) from exc

        logger.info("Removed image", extra={"key": url[len(prefix):]})
