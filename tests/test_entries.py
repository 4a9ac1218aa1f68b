"""Tests for the entry store: create, list, update and delete."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timesheets.core.errors import EntryValidationError, NotFoundError
from timesheets.crud.entries import (
    clean_entry_fields,
    create_entry,
    delete_entry,
    get_entry,
    list_entries,
    update_entry,
)
from timesheets.data import seed
from timesheets.db.store import EntryStore, sequential_entry_ids


def _payload(**overrides):
    payload = {
        "date": "2024-01-24",
        "project_name": "API Integration",
        "work_type": "Research",
        "description": "Evaluated payment providers",
        "hours": 2.5,
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def store():
    return EntryStore(id_generator=sequential_entry_ids(prefix="n"))


def test_list_entries_returns_seeded_week_in_order(store):
    entries = list_entries(store, "4")
    assert [entry.id for entry in entries] == [f"e{i}" for i in range(1, 9)]
    assert all(entry.timesheet_id == "4" for entry in entries)


def test_list_entries_unknown_timesheet_is_empty(store):
    assert list_entries(store, "does-not-exist") == []


def test_create_entry_appends_with_fresh_id(store):
    before = {entry.id for entry in list_entries(store, "4")}
    entry = create_entry(store, "4", _payload())

    assert entry.id not in before
    assert entry.timesheet_id == "4"
    assert entry.hours == 2.5
    assert list_entries(store, "4")[-1] == entry


def test_create_entry_starts_collection_for_empty_week(store):
    entry = create_entry(store, "1", _payload())
    assert list_entries(store, "1") == [entry]


def test_create_entry_allows_unknown_timesheet(store):
    entry = create_entry(store, "orphan", _payload())
    assert list_entries(store, "orphan") == [entry]


def test_create_entry_accepts_numeric_string_hours(store):
    entry = create_entry(store, "4", _payload(hours="7.5"))
    assert entry.hours == 7.5


def test_created_ids_are_unique_across_rapid_creates():
    store = EntryStore()
    ids = {create_entry(store, "4", _payload()).id for _ in range(50)}
    assert len(ids) == 50


def test_id_generator_collisions_are_skipped():
    # The generator starts on an id the seed already uses.
    store = EntryStore(id_generator=sequential_entry_ids(prefix="e", start=8))
    entry = create_entry(store, "4", _payload())
    assert entry.id == "e9"


@pytest.mark.parametrize("hours", [0, -1, 24.5, "abc", None, "nan"])
def test_create_entry_rejects_bad_hours(store, hours):
    with pytest.raises(EntryValidationError) as excinfo:
        create_entry(store, "4", _payload(hours=hours))
    assert excinfo.value.errors == {"hours": "Hours must be between 0 and 24"}
    assert len(list_entries(store, "4")) == 8


def test_create_entry_accepts_full_day(store):
    assert create_entry(store, "4", _payload(hours=24)).hours == 24


def test_create_entry_reports_every_missing_field(store):
    with pytest.raises(EntryValidationError) as excinfo:
        create_entry(store, "4", {"description": "   "})
    assert excinfo.value.errors == {
        "projectName": "Project name is required",
        "workType": "Work type is required",
        "description": "Description is required",
        "hours": "Hours must be between 0 and 24",
        "date": "Date is required",
    }


@pytest.mark.parametrize("value", ["2024-13-01", "24/01/2024", "20240124"])
def test_create_entry_rejects_non_iso_dates(store, value):
    with pytest.raises(EntryValidationError) as excinfo:
        create_entry(store, "4", _payload(date=value))
    assert excinfo.value.errors["date"] == "Date must be an ISO date (YYYY-MM-DD)"


def test_update_entry_changes_only_supplied_fields(store):
    original = get_entry(store, "4", "e3")
    updated = update_entry(store, "4", "e3", {"hours": 3, "description": "Reworked hero"})

    assert updated.hours == 3
    assert updated.description == "Reworked hero"
    assert updated.project_name == original.project_name
    assert updated.work_type == original.work_type
    assert updated.date == original.date
    assert get_entry(store, "4", "e3") == updated
    assert [entry.id for entry in list_entries(store, "4")].index("e3") == 2


def test_update_entry_ignores_identity_fields(store):
    updated = update_entry(store, "4", "e1", {"id": "hijack", "timesheet_id": "9", "hours": 1})
    assert updated.id == "e1"
    assert updated.timesheet_id == "4"


def test_update_entry_unknown_entry_is_not_found(store):
    with pytest.raises(NotFoundError, match="Entry not found"):
        update_entry(store, "4", "missing", {"hours": 1})


def test_update_entry_week_without_collection_is_not_found(store):
    # Week 1 is a real timesheet but has never had an entry.
    with pytest.raises(NotFoundError, match="Timesheet not found"):
        update_entry(store, "1", "e1", {"hours": 1})


def test_update_entry_validates_supplied_fields(store):
    with pytest.raises(EntryValidationError):
        update_entry(store, "4", "e1", {"hours": 30})
    assert get_entry(store, "4", "e1").hours == 4


def test_delete_entry_removes_only_target(store):
    delete_entry(store, "4", "e2")
    remaining = [entry.id for entry in list_entries(store, "4")]
    assert remaining == ["e1", "e3", "e4", "e5", "e6", "e7", "e8"]


def test_delete_entry_twice_is_a_no_op(store):
    delete_entry(store, "4", "e2")
    delete_entry(store, "4", "e2")
    assert len(list_entries(store, "4")) == 7


def test_delete_entry_week_without_collection_is_not_found(store):
    with pytest.raises(NotFoundError, match="Timesheet not found"):
        delete_entry(store, "2", "e1")


def test_stores_do_not_share_state():
    first = EntryStore()
    second = EntryStore()
    delete_entry(first, "4", "e1")

    assert len(list_entries(first, "4")) == 7
    assert len(list_entries(second, "4")) == 8
    assert len(seed.SEED_ENTRIES["4"]) == 8


def test_reset_restores_seed(store):
    create_entry(store, "4", _payload())
    delete_entry(store, "4", "e1")
    store.reset()
    assert [entry.id for entry in list_entries(store, "4")] == [f"e{i}" for i in range(1, 9)]


def test_clean_entry_fields_partial_skips_absent_keys():
    assert clean_entry_fields({"work_type": "Meeting", "extra": 1}, partial=True) == {"work_type": "Meeting"}
