"""Owned state container for the urge collection."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional
from uuid import UUID

from .domain.repositories.urge import UrgeRepository
from .logging_config import get_logger
from .models.urge import Urge
from .services.urges import apply_relapse, apply_tap

logger = get_logger(__name__)

Listener = Callable[["UrgeStore"], None]


class UrgeStore:
    """Holds the urge collection and is the only place it is mutated.

    The collection is loaded once on construction and written back in full
    after every mutation. Mutations return the affected record, or ``None``
    when the id is unknown; they never raise for a missing id.
    """

    def __init__(self, repository: UrgeRepository):
        self.repository = repository
        self._urges: list[Urge] = repository.load_all()
        self._listeners: list[Listener] = []
        logger.info("Urge store ready", extra={"count": len(self._urges)})

    @property
    def urges(self) -> tuple[Urge, ...]:
        """Snapshot of the collection in insertion order."""
        return tuple(self._urges)

    def __len__(self) -> int:
        return len(self._urges)

    def get(self, urge_id: UUID) -> Optional[Urge]:
        index = self._index_of(urge_id)
        return None if index is None else self._urges[index]

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every mutation; returns an unsubscribe callable."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add(self, name: str) -> Optional[Urge]:
        """Append a new urge with zeroed counters."""

        trimmed = name.strip()
        if not trimmed:
            logger.warning("Refusing to add an urge with a blank name")
            return None
        urge = Urge(name=trimmed)
        self._urges.append(urge)
        logger.info("Urge added", extra={"urge_id": str(urge.id), "urge_name": trimmed})
        self._commit()
        return urge

    def record_tap(self, urge_id: UUID, *, today: date | None = None) -> Optional[Urge]:
        """Record one resisted urge on ``today`` (local calendar day by default)."""

        index = self._index_of(urge_id)
        if index is None:
            logger.debug("Tap ignored for unknown urge", extra={"urge_id": str(urge_id)})
            return None

        before = self._urges[index]
        updated = apply_tap(before, today=today)
        self._urges[index] = updated
        logger.info(
            "Tap recorded",
            extra={
                "urge_id": str(urge_id),
                "total_count": updated.total_count,
                "current_streak": updated.current_streak,
            },
        )
        for badge in updated.badges_earned[len(before.badges_earned):]:
            logger.info("Badge earned", extra={"urge_id": str(urge_id), "badge": badge})
        self._commit()
        return updated

    def reset(self, urge_id: UUID, *, today: date | None = None) -> Optional[Urge]:
        """Log a relapse for ``today`` and clear the running count and streak."""

        index = self._index_of(urge_id)
        if index is None:
            logger.debug("Reset ignored for unknown urge", extra={"urge_id": str(urge_id)})
            return None

        updated = apply_relapse(self._urges[index], today=today)
        self._urges[index] = updated
        logger.info(
            "Relapse logged",
            extra={"urge_id": str(urge_id), "best_streak": updated.best_streak},
        )
        self._commit()
        return updated

    def remove(self, urge_id: UUID) -> Optional[Urge]:
        index = self._index_of(urge_id)
        if index is None:
            logger.debug("Remove ignored for unknown urge", extra={"urge_id": str(urge_id)})
            return None

        removed = self._urges.pop(index)
        logger.info("Urge removed", extra={"urge_id": str(urge_id)})
        self._commit()
        return removed

    def rename(self, urge_id: UUID, new_name: str) -> Optional[Urge]:
        index = self._index_of(urge_id)
        trimmed = new_name.strip()
        if index is None or not trimmed:
            logger.debug("Rename ignored", extra={"urge_id": str(urge_id)})
            return None

        updated = self._urges[index].model_copy(update={"name": trimmed})
        self._urges[index] = updated
        logger.info("Urge renamed", extra={"urge_id": str(urge_id), "urge_name": trimmed})
        self._commit()
        return updated

    def _index_of(self, urge_id: UUID) -> Optional[int]:
        for index, urge in enumerate(self._urges):
            if urge.id == urge_id:
                return index
        return None

    def _commit(self) -> None:
        self.repository.save_all(self._urges)
        for listener in list(self._listeners):
            listener(self)


__all__ = ["UrgeStore"]
