"""CRUD helpers for the entries logged against a timesheet."""

from __future__ import annotations

import logging
import math
import re
from datetime import date as date_cls
from typing import Any, Mapping

from ..core.errors import EntryValidationError, NotFoundError
from ..db.store import EntryStore
from ..models.entry import EDITABLE_FIELDS, TimesheetEntry

logger = logging.getLogger("timesheets.crud.entries")

MAX_HOURS_PER_ENTRY = 24
ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_REQUIRED_TEXT = {
    "project_name": ("projectName", "Project name is required"),
    "work_type": ("workType", "Work type is required"),
    "description": ("description", "Description is required"),
}


def _parse_hours(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        hours = float(value)
    elif isinstance(value, str):
        try:
            hours = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return hours if math.isfinite(hours) else None


def _check_date(value: Any) -> str | None:
    """Return an error message, or None when ``value`` is a real ISO date."""

    if not isinstance(value, str) or not value.strip():
        return "Date is required"
    if not ISO_DATE_RE.match(value):
        return "Date must be an ISO date (YYYY-MM-DD)"
    try:
        date_cls.fromisoformat(value)
    except ValueError:
        return "Date must be an ISO date (YYYY-MM-DD)"
    return None


def clean_entry_fields(payload: Mapping[str, Any], *, partial: bool = False) -> dict[str, Any]:
    """Validate entry fields and return them ready to store.

    With ``partial`` only the keys present in ``payload`` are checked, which is
    how updates behave. Unknown keys are dropped. Raises
    ``EntryValidationError`` listing every failing field.
    """

    errors: dict[str, str] = {}
    cleaned: dict[str, Any] = {}

    for field, (wire_name, message) in _REQUIRED_TEXT.items():
        if partial and field not in payload:
            continue
        value = payload.get(field)
        if not isinstance(value, str) or not value.strip():
            errors[wire_name] = message
        else:
            cleaned[field] = value

    if not partial or "hours" in payload:
        hours = _parse_hours(payload.get("hours"))
        if hours is None or hours <= 0 or hours > MAX_HOURS_PER_ENTRY:
            errors["hours"] = "Hours must be between 0 and 24"
        else:
            cleaned["hours"] = hours

    if not partial or "date" in payload:
        problem = _check_date(payload.get("date"))
        if problem:
            errors["date"] = problem
        else:
            cleaned["date"] = payload["date"]

    if errors:
        raise EntryValidationError(errors)
    return {key: cleaned[key] for key in EDITABLE_FIELDS if key in cleaned}


def list_entries(store: EntryStore, timesheet_id: str) -> list[TimesheetEntry]:
    with store.lock:
        return list(store.entries.get(timesheet_id, []))


def get_entry(store: EntryStore, timesheet_id: str, entry_id: str) -> TimesheetEntry | None:
    with store.lock:
        for entry in store.entries.get(timesheet_id, []):
            if entry.id == entry_id:
                return entry
    return None


def create_entry(store: EntryStore, timesheet_id: str, payload: Mapping[str, Any]) -> TimesheetEntry:
    data = clean_entry_fields(payload)
    with store.lock:
        entry = TimesheetEntry(id=store.new_entry_id(), timesheet_id=timesheet_id, **data)
        store.entries.setdefault(timesheet_id, []).append(entry)
    logger.info(
        "entry.created",
        extra={"extra_data": {"timesheet_id": timesheet_id, "entry_id": entry.id, "hours": entry.hours}},
    )
    return entry


def update_entry(
    store: EntryStore, timesheet_id: str, entry_id: str, payload: Mapping[str, Any]
) -> TimesheetEntry:
    """Shallow-merge the supplied fields into one entry.

    Fails when the week has never had a collection, even if it is a known
    timesheet. Fields not present in ``payload`` are left alone.
    """

    changes = clean_entry_fields(payload, partial=True)
    with store.lock:
        rows = store.entries.get(timesheet_id)
        if rows is None:
            raise NotFoundError("Timesheet not found")
        for index, entry in enumerate(rows):
            if entry.id == entry_id:
                break
        else:
            raise NotFoundError("Entry not found")
        updated = entry.model_copy(update=changes)
        rows[index] = updated
    logger.info(
        "entry.updated",
        extra={"extra_data": {"timesheet_id": timesheet_id, "entry_id": entry_id, "fields": sorted(changes)}},
    )
    return updated


def delete_entry(store: EntryStore, timesheet_id: str, entry_id: str) -> None:
    """Remove an entry; an unknown ``entry_id`` is not an error."""

    with store.lock:
        rows = store.entries.get(timesheet_id)
        if rows is None:
            raise NotFoundError("Timesheet not found")
        remaining = [entry for entry in rows if entry.id != entry_id]
        removed = len(rows) - len(remaining)
        store.entries[timesheet_id] = remaining
    logger.info(
        "entry.deleted",
        extra={"extra_data": {"timesheet_id": timesheet_id, "entry_id": entry_id, "removed": removed}},
    )
