"""Pydantic schemas for the timesheet listing."""

from __future__ import annotations

from ..models.base import CamelModel
from ..models.timesheet import Timesheet


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class TimesheetListResponse(CamelModel):
    data: list[Timesheet]
    pagination: Pagination

    model_config = {
        "json_schema_extra": {
            "example": {
                "data": [
                    {
                        "id": "5",
                        "weekNumber": 5,
                        "dateRange": "28 January - 1 February, 2024",
                        "startDate": "2024-01-28",
                        "endDate": "2024-02-01",
                        "status": "MISSING",
                        "totalHours": 0,
                    }
                ],
                "pagination": {"page": 1, "limit": 10, "total": 1, "totalPages": 1},
            }
        }
    }


class TimesheetResponse(CamelModel):
    data: Timesheet


class CatalogOptions(CamelModel):
    project_names: list[str]
    work_types: list[str]


class OptionsResponse(CamelModel):
    data: CatalogOptions
