"""Which urge the tracking and stats screens are focused on."""

from __future__ import annotations

from typing import Optional, Sequence
from uuid import UUID

from .models.urge import Urge


class UrgeSelection:
    """Explicit selection that falls back to the first urge.

    A selection pointing at a deleted urge resolves to the first urge instead.
    """

    def __init__(self, selected_id: Optional[UUID] = None):
        self.selected_id = selected_id

    def select(self, urge_id: Optional[UUID]) -> None:
        self.selected_id = urge_id

    def clear(self) -> None:
        self.selected_id = None

    def resolve(self, urges: Sequence[Urge]) -> Optional[Urge]:
        if self.selected_id is not None:
            for urge in urges:
                if urge.id == self.selected_id:
                    return urge
        return urges[0] if urges else None

    def sync(self, urges: Sequence[Urge]) -> Optional[Urge]:
        """Resolve and store the result, repointing a dangling selection."""

        current = self.resolve(urges)
        self.selected_id = current.id if current else None
        return current

    def is_selected(self, urge: Urge, urges: Sequence[Urge]) -> bool:
        current = self.resolve(urges)
        return current is not None and current.id == urge.id


__all__ = ["UrgeSelection"]
