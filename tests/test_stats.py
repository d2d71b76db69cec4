"""Tests for the stats-screen aggregations."""

from __future__ import annotations

from datetime import date

from urgebutton.services.stats import (
    DayData,
    UrgeSummary,
    build_day_series,
    longest_no_relapse_run,
    summarize,
    today_counts,
)


class TestBuildDaySeries:
    """Tests for turning daily logs into a sorted series."""

    def test_empty_urge_has_no_days(self, urge_factory):
        """No logs, no points."""
        assert build_day_series(urge_factory()) == []

    def test_sorted_chronologically(self, urge_factory):
        """Points are ordered by day regardless of key insertion order."""
        urge = urge_factory(
            daily_resisted={"2024-03-05": 1, "2024-02-28": 4, "2024-03-01": 2},
        )

        days = [point.day for point in build_day_series(urge)]

        assert days == [date(2024, 2, 28), date(2024, 3, 1), date(2024, 3, 5)]

    def test_union_of_resisted_and_relapsed_days(self, urge_factory):
        """A relapse-only day still appears, with zero resisted."""
        urge = urge_factory(
            daily_resisted={"2024-03-01": 3},
            daily_relapsed={"2024-03-01": 1, "2024-03-02": 2},
        )

        assert build_day_series(urge) == [
            DayData(day=date(2024, 3, 1), resisted=3, relapsed=1),
            DayData(day=date(2024, 3, 2), resisted=0, relapsed=2),
        ]

    def test_unparseable_keys_skipped(self, urge_factory):
        """Keys that are not canonical day keys are dropped."""
        urge = urge_factory(daily_resisted={"garbage": 9, "2024-03-01": 1})

        assert build_day_series(urge) == [DayData(day=date(2024, 3, 1), resisted=1, relapsed=0)]


class TestSummary:
    """Tests for the summary cards."""

    def test_empty_summary(self, urge_factory):
        """An untouched urge summarizes to zeros."""
        assert summarize(urge_factory()) == UrgeSummary(0, 0, 0, 0)

    def test_totals(self, urge_factory):
        """Totals sum each log; days count distinct logged days."""
        urge = urge_factory(
            daily_resisted={"2024-03-01": 3, "2024-03-02": 5},
            daily_relapsed={"2024-03-02": 1, "2024-03-04": 2},
        )

        summary = summarize(urge)

        assert summary.total_days == 3
        assert summary.total_resisted == 8
        assert summary.total_relapsed == 3

    def test_longest_run_resets_on_relapse(self, urge_factory):
        """A relapse day breaks the no-relapse run."""
        urge = urge_factory(
            daily_resisted={
                "2024-03-01": 1,
                "2024-03-02": 1,
                "2024-03-03": 1,
                "2024-03-04": 1,
                "2024-03-05": 1,
            },
            daily_relapsed={"2024-03-03": 1},
        )

        assert summarize(urge).longest_no_relapse_streak == 2

    def test_longest_run_ignores_calendar_gaps(self, urge_factory):
        """Unlogged days between entries do not break the run."""
        urge = urge_factory(
            daily_resisted={"2024-03-01": 1, "2024-03-10": 1, "2024-04-01": 1},
        )

        assert summarize(urge).longest_no_relapse_streak == 3

    def test_longest_run_helper_on_all_relapses(self):
        """Only relapse days means no run at all."""
        series = [DayData(date(2024, 3, d), 0, 1) for d in range(1, 4)]
        assert longest_no_relapse_run(series) == 0


class TestTodayCounts:
    """Tests for the tracking screen's daily counters."""

    def test_counts_for_logged_day(self, urge_factory, day1):
        urge = urge_factory(daily_resisted={"2024-03-01": 4}, daily_relapsed={"2024-03-01": 1})
        assert today_counts(urge, today=day1) == (4, 1)

    def test_zero_for_unlogged_day(self, urge_factory, day1):
        urge = urge_factory(daily_resisted={"2024-02-29": 4})
        assert today_counts(urge, today=day1) == (0, 0)
