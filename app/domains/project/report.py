"""Weekly time report for a project's cards.

Closed intervals are bucketed by the ISO year and week of their start and
summed per bucket. Totals are reported in hours rounded to one decimal.
"""

from collections import defaultdict
from collections.abc import Iterable
from datetime import datetime
from typing import Any, Optional


def interval_minutes(start: datetime, stop: datetime) -> float:
    """Elapsed minutes between two timestamps."""
    return (stop - start).total_seconds() / 60


def weekly_minutes(intervals: Iterable[tuple[datetime, datetime]]) -> dict[tuple[int, int], float]:
    """Sum interval minutes per ISO ``(year, week)`` of the interval start."""
    buckets: dict[tuple[int, int], float] = defaultdict(float)
    for start, stop in intervals:
        iso = start.isocalendar()
        buckets[(iso[0], iso[1])] += interval_minutes(start, stop)
    return dict(buckets)


def build_time_report(
    intervals: Iterable[tuple[datetime, datetime]],
    estimated_hours: Optional[float] = None,
) -> dict[str, Any]:
    """
    Aggregate closed intervals into the project time report.

    Args:
        intervals: ``(start, stop)`` pairs from all of the project's cards
        estimated_hours: Project estimate, ``None`` when not set

    Returns:
        Dictionary with total hours spent, hours left (``None`` without an
        estimate), average hours per logged week and the weekly breakdown
    """
    buckets = weekly_minutes(intervals)

    total_hours_spent = round(sum(buckets.values()) / 60, 1)
    total_hours_left = (
        round(estimated_hours - total_hours_spent, 1) if estimated_hours is not None else None
    )
    average_hours_per_week = round(total_hours_spent / len(buckets), 1) if buckets else 0.0

    return {
        "total_hours_spent": total_hours_spent,
        "total_hours_left": total_hours_left,
        "average_hours_per_week": average_hours_per_week,
        "weekly_hours": [
            {"year": year, "week": week, "hours": round(minutes / 60, 1)}
            for (year, week), minutes in sorted(buckets.items())
        ],
    }
