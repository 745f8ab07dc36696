from __future__ import annotations

from abc import ABC, abstractmethod


class ImageStorage(ABC):
    @abstractmethod
    def upload(self, filename: str, content: bytes, owner_id: str) -> str:
        """
        Store an image for an owner (e.g. a car) and return its public URL.

        Raises:
            PersistenceError: If the image could not be stored
        """
        ...

    @abstractmethod
    def delete(self, url: str) -> None:
        """
        Remove a previously uploaded image. Unknown URLs are ignored.

        Raises:
            PersistenceError: If the image could not be removed
        """
        ...
