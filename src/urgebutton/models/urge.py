"""Urge record persisted as part of the saved collection."""

from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

BADGE_MILESTONES: tuple[int, ...] = (7, 30, 100)


def badge_name(milestone: int) -> str:
    """Return the display name of the badge awarded at ``milestone`` days."""

    return f"{milestone}-Day Streak"


class Urge(BaseModel):
    """A habit the user is trying to resist, with counters and per-day logs.

    Field names serialize in camelCase so the stored blob keeps the layout the
    app has always written. Fields missing from older blobs fall back to their
    zero/empty defaults.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str
    total_count: int = Field(default=0, ge=0, alias="totalCount")
    current_streak: int = Field(default=0, ge=0, alias="currentStreak")
    best_streak: int = Field(default=0, ge=0, alias="bestStreak")
    last_tap_date: Optional[date] = Field(default=None, alias="lastTapDate")
    daily_resisted: dict[str, NonNegativeInt] = Field(default_factory=dict, alias="dailyResisted")
    daily_relapsed: dict[str, NonNegativeInt] = Field(default_factory=dict, alias="dailyRelapsed")
    badges_earned: list[str] = Field(default_factory=list, alias="badgesEarned")

    model_config = ConfigDict(populate_by_name=True)


__all__ = ["BADGE_MILESTONES", "Urge", "badge_name"]
