from __future__ import annotations

from rentacar.adapters.local_image_storage import image_key
from rentacar.ports.image_storage import ImageStorage


class InMemoryImageStorage(ImageStorage):
    """Keeps uploaded bytes in a dict keyed by their storage path."""

    def __init__(self, base_url: str = "memory://images") -> None:
        self._base_url = base_url.rstrip("/")
        self.files: dict[str, bytes] = {}

    def upload(self, filename: str, content: bytes, owner_id: str) -> str:
        key = image_key(filename, owner_id)
        self.files[key] = content
        return f"{self._base_url}/{key}"

    def delete(self, url: str) -> None:
        prefix = f"{self._base_url}/"
        if url.startswith(prefix):
            self.files.pop(url[len(prefix):], None)
