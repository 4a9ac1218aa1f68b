from __future__ import annotations

from fastapi import APIRouter, Depends

from ..data.seed import PROJECT_NAMES, WORK_TYPES
from ..deps.auth import require_user
from ..schemas.timesheet import CatalogOptions, OptionsResponse

router = APIRouter(prefix="/api", tags=["catalog"], dependencies=[Depends(require_user)])


@router.get("/options", response_model=OptionsResponse, summary="Projects and work types offered by the entry form")
def api_options():
    return OptionsResponse(data=CatalogOptions(project_names=list(PROJECT_NAMES), work_types=list(WORK_TYPES)))
