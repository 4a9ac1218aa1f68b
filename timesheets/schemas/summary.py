"""Derived per-week figures returned by the summary endpoint."""

from __future__ import annotations

from pydantic import Field

from ..models.base import CamelModel
from ..models.entry import TimesheetEntry


class DaySummary(CamelModel):
    date: str
    hours: float
    entries: list[TimesheetEntry] = Field(default_factory=list)


class TimesheetSummary(CamelModel):
    timesheet_id: str
    total_hours: float
    weekly_target: float
    progress_percentage: float
    progress_label: str
    days: list[DaySummary] = Field(default_factory=list)


class SummaryResponse(CamelModel):
    data: TimesheetSummary
