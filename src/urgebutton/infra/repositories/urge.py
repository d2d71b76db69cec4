"""SQLModel implementation of the urge collection repository."""

from __future__ import annotations

import time
from typing import Callable, Sequence

from pydantic import TypeAdapter, ValidationError
from sqlmodel import Session

from ...logging_config import get_logger
from ...models.urge import Urge
from .settings import SQLModelSettingsRepository

logger = get_logger(__name__)

_COLLECTION = TypeAdapter(list[Urge])


class SQLModelUrgeRepository:
    """Stores every urge as one JSON array under a single key/value slot."""

    def __init__(self, session_factory: Callable[[], Session], *, storage_key: str = "savedUrges"):
        """Initialize with a session factory and the slot name."""
        self.session_factory = session_factory
        self.storage_key = storage_key
        self.settings = SQLModelSettingsRepository(session_factory)

    def load_all(self) -> list[Urge]:
        """Decode the saved collection.

        A missing or blank slot means nothing was saved yet. A blob that fails
        to decode is copied to a ``<key>.corrupt-<timestamp>`` slot and the
        collection starts empty.
        """
        raw = self.settings.get_value(self.storage_key)
        if raw is None or not raw.strip():
            return []

        try:
            urges = _COLLECTION.validate_json(raw)
        except ValidationError as exc:
            backup_key = f"{self.storage_key}.corrupt-{int(time.time())}"
            self.settings.set(backup_key, raw, description="Undecodable urge collection")
            self.settings.set(self.storage_key, "[]")
            logger.warning(
                "Saved urges could not be decoded; starting empty",
                extra={"backup_key": backup_key, "error_count": exc.error_count()},
            )
            return []

        logger.debug("Loaded urges", extra={"count": len(urges)})
        return urges

    def save_all(self, urges: Sequence[Urge]) -> None:
        """Serialize and write the whole collection."""
        payload = _COLLECTION.dump_json(list(urges), by_alias=True).decode("utf-8")
        self.settings.set(self.storage_key, payload)

    def backup_keys(self) -> list[str]:
        """Return slots holding blobs set aside by ``load_all``."""
        return self.settings.list_keys(prefix=f"{self.storage_key}.corrupt-")


__all__ = ["SQLModelUrgeRepository"]
