"""Mock directory: the users, catalogs and weeks a fresh store starts with.

Plain data only. ``EntryStore`` deep-copies what it needs, so nothing here is
ever mutated at runtime.
"""

from __future__ import annotations

from typing import Any

SEED_USERS: list[dict[str, str]] = [
    {"id": "1", "email": "saqib@example.com", "name": "Saqib"},
    {"id": "2", "email": "test@example.com", "name": "Test User"},
]

SEED_TIMESHEETS: list[dict[str, Any]] = [
    {
        "id": "1",
        "week_number": 1,
        "date_range": "1 - 5 January, 2024",
        "start_date": "2024-01-01",
        "end_date": "2024-01-05",
        "status": "COMPLETED",
        "total_hours": 40,
    },
    {
        "id": "2",
        "week_number": 2,
        "date_range": "8 - 12 January, 2024",
        "start_date": "2024-01-08",
        "end_date": "2024-01-12",
        "status": "COMPLETED",
        "total_hours": 40,
    },
    {
        "id": "3",
        "week_number": 3,
        "date_range": "15 - 19 January, 2024",
        "start_date": "2024-01-15",
        "end_date": "2024-01-19",
        "status": "INCOMPLETE",
        "total_hours": 32,
    },
    {
        "id": "4",
        "week_number": 4,
        "date_range": "22 - 26 January, 2024",
        "start_date": "2024-01-22",
        "end_date": "2024-01-26",
        "status": "COMPLETED",
        "total_hours": 40,
    },
    {
        "id": "5",
        "week_number": 5,
        "date_range": "28 January - 1 February, 2024",
        "start_date": "2024-01-28",
        "end_date": "2024-02-01",
        "status": "MISSING",
        "total_hours": 0,
    },
]


def _homepage_entry(entry_id: str, date: str, work_type: str, description: str) -> dict[str, Any]:
    return {
        "id": entry_id,
        "timesheet_id": "4",
        "date": date,
        "project_name": "Homepage Development",
        "work_type": work_type,
        "description": description,
        "hours": 4,
    }


# Only week 4 ships with logged work; every other week starts without a
# collection at all (see ``timesheets.crud.entries.update_entry`` for why that matters).
SEED_ENTRIES: dict[str, list[dict[str, Any]]] = {
    "4": [
        _homepage_entry("e1", "2024-01-21", "Development", "Implemented responsive navigation"),
        _homepage_entry("e2", "2024-01-21", "Development", "Fixed header styling issues"),
        _homepage_entry("e3", "2024-01-22", "Development", "Created hero section component"),
        _homepage_entry("e4", "2024-01-22", "Bug fixes", "Resolved mobile menu issues"),
        _homepage_entry("e5", "2024-01-22", "Development", "Added footer component"),
        _homepage_entry("e6", "2024-01-23", "Development", "Implemented contact form"),
        _homepage_entry("e7", "2024-01-23", "Testing", "Cross-browser testing"),
        _homepage_entry("e8", "2024-01-23", "Development", "Performance optimization"),
    ],
}

PROJECT_NAMES: list[str] = [
    "Homepage Development",
    "Mobile App Development",
    "API Integration",
    "Database Migration",
    "UI/UX Design",
    "Client Meeting",
    "Code Review",
]

WORK_TYPES: list[str] = [
    "Development",
    "Bug fixes",
    "Testing",
    "Code Review",
    "Meeting",
    "Documentation",
    "Research",
]
