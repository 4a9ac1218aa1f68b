"""Weekly timesheet records."""

from __future__ import annotations

from enum import Enum

from pydantic import ConfigDict

from .base import CamelModel


class TimesheetStatus(str, Enum):
    COMPLETED = "COMPLETED"
    INCOMPLETE = "INCOMPLETE"
    MISSING = "MISSING"


class Timesheet(CamelModel):
    """One working week.

    ``status`` and ``total_hours`` are stored values. They are not recomputed
    from the entries logged against the week, so the two can disagree.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    week_number: int
    date_range: str
    start_date: str
    end_date: str
    status: TimesheetStatus
    total_hours: float


__all__ = ["Timesheet", "TimesheetStatus"]
