from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from ..models.entry import TimesheetEntry
from ..schemas.summary import DaySummary, TimesheetSummary

WEEKLY_TARGET_HOURS = 40
WHOLE_PERCENT = Decimal("1")


def total_hours(entries: Iterable[TimesheetEntry]) -> float:
    """Sum of the hours logged across ``entries``."""
    return sum((entry.hours for entry in entries), 0.0)


def group_by_date(entries: Iterable[TimesheetEntry]) -> dict[str, list[TimesheetEntry]]:
    """Bucket entries per day.

    Days come back in ascending order (plain string sort works because dates
    are ISO ``YYYY-MM-DD``); inside a day entries keep the order given.
    """
    grouped: dict[str, list[TimesheetEntry]] = {}
    for entry in entries:
        grouped.setdefault(entry.date, []).append(entry)
    return {day: grouped[day] for day in sorted(grouped)}


def progress_percentage(hours: float, weekly_target: float = WEEKLY_TARGET_HOURS) -> float:
    """Share of the weekly target reached, capped at 100. Not rounded."""
    if weekly_target <= 0:
        raise ValueError("weekly_target must be positive")
    return min(100.0, hours / weekly_target * 100)


def format_progress(percentage: float) -> str:
    """Whole-percent label; halves round up (12.5 -> "13%")."""
    rounded = Decimal(str(percentage)).quantize(WHOLE_PERCENT, rounding=ROUND_HALF_UP)
    return f"{rounded}%"


def summarize(
    timesheet_id: str,
    entries: Sequence[TimesheetEntry],
    weekly_target: float = WEEKLY_TARGET_HOURS,
) -> TimesheetSummary:
    hours = total_hours(entries)
    progress = progress_percentage(hours, weekly_target)
    days = [
        DaySummary(date=day, hours=total_hours(rows), entries=rows)
        for day, rows in group_by_date(entries).items()
    ]
    return TimesheetSummary(
        timesheet_id=timesheet_id,
        total_hours=hours,
        weekly_target=weekly_target,
        progress_percentage=progress,
        progress_label=format_progress(progress),
        days=days,
    )
