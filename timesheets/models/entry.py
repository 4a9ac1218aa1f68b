"""Time entries logged against a timesheet."""

from __future__ import annotations

from .base import CamelModel

# Fields a client may change after creation; ``id`` and ``timesheet_id`` are fixed.
EDITABLE_FIELDS = ("date", "project_name", "work_type", "description", "hours")


class TimesheetEntry(CamelModel):
    id: str
    timesheet_id: str
    date: str
    project_name: str
    work_type: str
    description: str
    hours: float


__all__ = ["EDITABLE_FIELDS", "TimesheetEntry"]
