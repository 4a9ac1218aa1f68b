"""Request and response payloads for timesheet entries.

Request fields are deliberately loose (everything optional, ``hours`` may be
a string): the crud layer owns the real rules so every client sees the same
per-field messages.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import ConfigDict, Field

from ..models.base import CamelModel
from ..models.entry import TimesheetEntry

HoursValue = Union[float, str, None]


class EntryFields(CamelModel):
    model_config = ConfigDict(extra="ignore")

    date: Optional[str] = None
    project_name: Optional[str] = None
    work_type: Optional[str] = None
    description: Optional[str] = None
    hours: HoursValue = None


class EntryCreate(EntryFields):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "date": "2024-01-22",
                "projectName": "Homepage Development",
                "workType": "Development",
                "description": "Created hero section component",
                "hours": 4,
            }
        }
    )


class EntryUpdate(EntryFields):
    entry_id: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={"example": {"entryId": "e3", "hours": 3.5}}
    )


class EntryResponse(CamelModel):
    data: TimesheetEntry


class EntryListResponse(CamelModel):
    data: list[TimesheetEntry]


class MessageResponse(CamelModel):
    message: str
