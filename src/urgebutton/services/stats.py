"""Read-only aggregations behind the tracking and stats screens."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..models.urge import Urge
from .urges import day_key, local_today, parse_day_key


@dataclass(frozen=True)
class DayData:
    """Resisted and relapsed counts for one logged day."""

    day: date
    resisted: int
    relapsed: int


@dataclass(frozen=True)
class UrgeSummary:
    """Headline numbers shown above the daily chart."""

    total_days: int
    total_resisted: int
    total_relapsed: int
    longest_no_relapse_streak: int


def today_counts(urge: Urge, *, today: date | None = None) -> tuple[int, int]:
    """Return ``(resisted, relapsed)`` logged for ``today``."""

    key = day_key(today or local_today())
    return urge.daily_resisted.get(key, 0), urge.daily_relapsed.get(key, 0)


def build_day_series(urge: Urge) -> list[DayData]:
    """Return chronologically sorted per-day counts for every logged day.

    Days come from both the resisted and relapsed logs; keys that are not
    valid day keys are skipped.
    """

    series = []
    for key in set(urge.daily_resisted) | set(urge.daily_relapsed):
        day = parse_day_key(key)
        if day is None:
            continue
        series.append(
            DayData(
                day=day,
                resisted=urge.daily_resisted.get(key, 0),
                relapsed=urge.daily_relapsed.get(key, 0),
            )
        )
    series.sort(key=lambda point: point.day)
    return series


def longest_no_relapse_run(series: list[DayData]) -> int:
    """Longest run of consecutive entries without a relapse.

    Runs are counted over logged entries, so a day with no log at all does not
    interrupt them.
    """

    longest = 0
    run = 0
    for point in series:
        if point.relapsed == 0:
            run += 1
            longest = max(longest, run)
        else:
            run = 0
    return longest


def summarize(urge: Urge) -> UrgeSummary:
    """Build the summary cards for ``urge``."""

    series = build_day_series(urge)
    return UrgeSummary(
        total_days=len(series),
        total_resisted=sum(point.resisted for point in series),
        total_relapsed=sum(point.relapsed for point in series),
        longest_no_relapse_streak=longest_no_relapse_run(series),
    )


__all__ = [
    "DayData",
    "UrgeSummary",
    "build_day_series",
    "longest_no_relapse_run",
    "summarize",
    "today_counts",
]
