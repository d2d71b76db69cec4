"""Streak, badge and daily-log bookkeeping for a single urge."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from ..models.urge import BADGE_MILESTONES, Urge, badge_name

DAY_KEY_FORMAT = "%Y-%m-%d"


class UrgeNameError(ValueError):
    """Raised when a user-supplied urge name is blank."""


def local_today() -> date:
    """Return the current calendar day in the local time zone."""

    return datetime.now().astimezone().date()


def day_key(day: date) -> str:
    """Return the canonical ``YYYY-MM-DD`` key for ``day``.

    Every daily log key goes through this function so that keys compare equal
    as plain strings.
    """

    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def parse_day_key(key: str) -> date | None:
    """Parse a day key back to a date; ``None`` when it is not a valid key."""

    try:
        parsed = datetime.strptime(key, DAY_KEY_FORMAT).date()
    except ValueError:
        return None
    return parsed if day_key(parsed) == key else None


def validate_urge_name(raw: str | None) -> str:
    """Return the trimmed name or raise ``UrgeNameError`` when nothing is left."""

    name = (raw or "").strip()
    if not name:
        raise UrgeNameError("Urge name cannot be empty")
    return name


def next_streak(current_streak: int, last_tap: date | None, today: date) -> int:
    """Return the streak after a resist event on ``today``.

    Yesterday continues the streak, a second tap on the same day leaves it
    alone, and anything else (never tapped, a gap, or a date after today)
    starts over at one.
    """

    if last_tap is None:
        return 1
    if last_tap == today - timedelta(days=1):
        return current_streak + 1
    if last_tap == today:
        return current_streak
    return 1


def new_badges(urge: Urge) -> list[str]:
    """Return milestone badges the urge's current streak has just reached."""

    earned = []
    for milestone in BADGE_MILESTONES:
        name = badge_name(milestone)
        if urge.current_streak == milestone and name not in urge.badges_earned:
            earned.append(name)
    return earned


def apply_tap(urge: Urge, *, today: date | None = None) -> Urge:
    """Return a copy of ``urge`` with one resist event recorded on ``today``."""

    today = today or local_today()
    key = day_key(today)
    updated = urge.model_copy(deep=True)

    updated.total_count += 1
    updated.daily_resisted[key] = updated.daily_resisted.get(key, 0) + 1
    updated.current_streak = next_streak(updated.current_streak, updated.last_tap_date, today)
    updated.last_tap_date = today
    updated.best_streak = max(updated.best_streak, updated.current_streak)
    updated.badges_earned.extend(new_badges(updated))
    return updated


def apply_relapse(urge: Urge, *, today: date | None = None) -> Urge:
    """Return a copy of ``urge`` with a relapse logged and its run cleared.

    Best streak, badges and the daily history are kept.
    """

    key = day_key(today or local_today())
    updated = urge.model_copy(deep=True)

    updated.daily_relapsed[key] = updated.daily_relapsed.get(key, 0) + 1
    updated.total_count = 0
    updated.current_streak = 0
    updated.last_tap_date = None
    return updated


__all__ = [
    "DAY_KEY_FORMAT",
    "UrgeNameError",
    "apply_relapse",
    "apply_tap",
    "day_key",
    "local_today",
    "new_badges",
    "next_streak",
    "parse_day_key",
    "validate_urge_name",
]
