"""In-process storage for timesheets and their entries.

One ``EntryStore`` is built per application (``create_app`` puts it on
``app.state``) or per test. Handlers reach it through ``get_store`` instead of
importing a module-level global, so two apps never share data.

Every read or write in ``timesheets.crud`` runs while holding ``store.lock``,
which keeps each operation atomic. Nothing spans operations: two clients
editing the same week can still overwrite each other.
"""

from __future__ import annotations

import copy
import itertools
import threading
from typing import Callable, Iterable, Mapping
from uuid import uuid4

from fastapi import Request

from ..data import seed
from ..models.entry import TimesheetEntry
from ..models.timesheet import Timesheet

IdGenerator = Callable[[], str]


def uuid_entry_ids() -> str:
    """Random entry id, safe under rapid or concurrent creates."""

    return f"e{uuid4().hex}"


def sequential_entry_ids(prefix: str = "e", start: int = 1) -> IdGenerator:
    """Deterministic ``e1, e2, ...`` ids, mainly for tests and fixtures."""

    counter = itertools.count(start)
    lock = threading.Lock()

    def _next() -> str:
        with lock:
            return f"{prefix}{next(counter)}"

    return _next


class EntryStore:
    """Timesheet list plus a timesheet-id -> ordered entries mapping."""

    def __init__(
        self,
        *,
        timesheets: Iterable[Mapping] | None = None,
        entries: Mapping[str, Iterable[Mapping]] | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self.lock = threading.RLock()
        self._id_generator = id_generator or uuid_entry_ids
        self._seed_timesheets = copy.deepcopy(list(seed.SEED_TIMESHEETS if timesheets is None else timesheets))
        self._seed_entries = copy.deepcopy(
            {key: list(rows) for key, rows in (seed.SEED_ENTRIES if entries is None else entries).items()}
        )
        self.timesheets: list[Timesheet] = []
        self.entries: dict[str, list[TimesheetEntry]] = {}
        self.reset()

    def reset(self) -> None:
        """Throw away every change and reload the seed rows."""

        with self.lock:
            self.timesheets = [Timesheet.model_validate(row) for row in self._seed_timesheets]
            self.entries = {
                timesheet_id: [TimesheetEntry.model_validate(row) for row in rows]
                for timesheet_id, rows in self._seed_entries.items()
            }

    def new_entry_id(self) -> str:
        """Ask the generator for an id not already used anywhere in the store."""

        with self.lock:
            taken = {entry.id for rows in self.entries.values() for entry in rows}
            while True:
                candidate = self._id_generator()
                if candidate not in taken:
                    return candidate


def get_store(request: Request) -> EntryStore:
    """FastAPI dependency returning the store owned by the running app."""

    return request.app.state.store
