"""Read-only queries over the seeded timesheet list."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ..db.store import EntryStore
from ..models.timesheet import Timesheet

ALL_STATUSES = "all"


@dataclass
class TimesheetPage:
    items: list[Timesheet] = field(default_factory=list)
    page: int = 1
    limit: int = 10
    total: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit > 0 else 0


def filter_by_status(timesheets: list[Timesheet], status: str | None) -> list[Timesheet]:
    """Keep weeks whose status matches ``status`` (any case).

    ``None``, an empty string and ``"all"`` keep everything. A status nobody
    has simply matches nothing.
    """

    wanted = (status or "").strip()
    if not wanted or wanted.lower() == ALL_STATUSES:
        return list(timesheets)
    wanted = wanted.upper()
    return [timesheet for timesheet in timesheets if timesheet.status.value == wanted]


def list_timesheets(
    store: EntryStore,
    status: str | None = None,
    page: int = 1,
    limit: int = 10,
) -> TimesheetPage:
    if limit < 1:
        raise ValueError("limit must be at least 1")
    with store.lock:
        matches = filter_by_status(store.timesheets, status)
    if page < 1:
        items: list[Timesheet] = []
    else:
        start = (page - 1) * limit
        items = matches[start : start + limit]
    return TimesheetPage(items=items, page=page, limit=limit, total=len(matches))


def get_timesheet(store: EntryStore, timesheet_id: str) -> Timesheet | None:
    with store.lock:
        for timesheet in store.timesheets:
            if timesheet.id == timesheet_id:
                return timesheet
    return None
