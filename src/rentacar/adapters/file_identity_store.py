"""JSON-file implementation of IdentityStore.

Keeps the current redacted identity across process restarts.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from rentacar.domain.errors import PersistenceError
from rentacar.domain.user import CREDENTIAL_FIELDS, User
from rentacar.ports.identity_store import IdentityStore

logger = logging.getLogger(__name__)


class FileIdentityStore(IdentityStore):
    """
    Stores one identity record as JSON at ``path``.

    - A missing file means no identity
    - An unreadable or malformed file is discarded (treated as no identity)
    - A record carrying a credential field is discarded and the file removed
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def load(self) -> User | None:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise PersistenceError("identity.load", path=str(self._path)) from exc

        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError("identity record must be a JSON object")
        except ValueError:
            logger.info("Discarding malformed identity record", extra={"path": str(self._path)})
            self.clear()
            return None

        leaked = CREDENTIAL_FIELDS & data.keys()
        if leaked:
            logger.warning(
                "Credential field found in cached identity, clearing it",
                extra={"path": str(self._path), "fields": sorted(leaked)},
            )
            self.clear()
            return None

        try:
            return User.from_dict(data)
        except (KeyError, TypeError, ValueError):
            logger.info("Discarding unreadable identity record", extra={"path": str(self._path)})
            self.clear()
            return None

    def save(self, user: User) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(user.to_dict()), encoding="utf-8")
        except OSError as exc:
            raise PersistenceError("identity.save", path=str(self._path)) from exc

    def clear(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:
            raise PersistenceError("identity.clear", path=str(self._path)) from exc
