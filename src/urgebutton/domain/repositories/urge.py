"""Urge collection repository protocol."""

from __future__ import annotations

from typing import Protocol, Sequence

from ...models.urge import Urge


class UrgeRepository(Protocol):
    """Loads and saves the whole urge collection as one unit."""

    def load_all(self) -> list[Urge]:
        """Return the saved collection, or an empty list when nothing usable is stored."""
        ...

    def save_all(self, urges: Sequence[Urge]) -> None:
        """Replace the saved collection with ``urges``."""
        ...
