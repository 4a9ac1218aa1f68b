from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ..core.config import AppSettings
from ..crud.entries import create_entry, delete_entry, list_entries, update_entry
from ..crud.timesheets import get_timesheet, list_timesheets
from ..db.store import EntryStore, get_store
from ..deps.auth import get_settings_dep, require_user
from ..schemas.entry import (
    EntryCreate,
    EntryListResponse,
    EntryResponse,
    EntryUpdate,
    MessageResponse,
)
from ..schemas.summary import SummaryResponse
from ..schemas.timesheet import Pagination, TimesheetListResponse, TimesheetResponse
from ..services.aggregation import summarize

router = APIRouter(prefix="/api/timesheets", tags=["timesheets"], dependencies=[Depends(require_user)])


def _parse_int(value: str | None, default: int) -> int:
    """Lenient query-string integer: anything unparseable means ``default``."""

    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


@router.get("", response_model=TimesheetListResponse)
def api_list_timesheets(
    status: str | None = Query(default=None),
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    store: EntryStore = Depends(get_store),
    settings: AppSettings = Depends(get_settings_dep),
):
    page_number = _parse_int(page, settings.DEFAULT_PAGE)
    page_size = _parse_int(limit, settings.DEFAULT_PAGE_LIMIT)
    if page_size < 1:
        page_size = settings.DEFAULT_PAGE_LIMIT
    result = list_timesheets(store, status=status, page=page_number, limit=page_size)
    return TimesheetListResponse(
        data=result.items,
        pagination=Pagination(
            page=result.page,
            limit=result.limit,
            total=result.total,
            total_pages=result.total_pages,
        ),
    )


@router.get("/{timesheet_id}", response_model=TimesheetResponse)
def api_get_timesheet(timesheet_id: str, store: EntryStore = Depends(get_store)):
    timesheet = get_timesheet(store, timesheet_id)
    if not timesheet:
        raise HTTPException(404, "Timesheet not found")
    return TimesheetResponse(data=timesheet)


@router.get("/{timesheet_id}/summary", response_model=SummaryResponse)
def api_timesheet_summary(
    timesheet_id: str,
    store: EntryStore = Depends(get_store),
    settings: AppSettings = Depends(get_settings_dep),
):
    entries = list_entries(store, timesheet_id)
    return SummaryResponse(data=summarize(timesheet_id, entries, settings.WEEKLY_TARGET_HOURS))


@router.get("/{timesheet_id}/entries", response_model=EntryListResponse)
def api_list_entries(timesheet_id: str, store: EntryStore = Depends(get_store)):
    return EntryListResponse(data=list_entries(store, timesheet_id))


@router.post("/{timesheet_id}/entries", response_model=EntryResponse, status_code=201)
def api_create_entry(timesheet_id: str, payload: EntryCreate, store: EntryStore = Depends(get_store)):
    entry = create_entry(store, timesheet_id, payload.model_dump())
    return EntryResponse(data=entry)


@router.put("/{timesheet_id}/entries", response_model=EntryResponse)
def api_update_entry(timesheet_id: str, payload: EntryUpdate, store: EntryStore = Depends(get_store)):
    changes = payload.model_dump(exclude_unset=True, exclude={"entry_id"})
    entry = update_entry(store, timesheet_id, payload.entry_id, changes)
    return EntryResponse(data=entry)


@router.delete("/{timesheet_id}/entries", response_model=MessageResponse)
def api_delete_entry(
    timesheet_id: str,
    entry_id: str | None = Query(default=None, alias="entryId"),
    store: EntryStore = Depends(get_store),
):
    if not entry_id:
        raise HTTPException(400, "Entry ID required")
    delete_entry(store, timesheet_id, entry_id)
    return MessageResponse(message="Entry deleted successfully")
