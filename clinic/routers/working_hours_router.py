from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from ..application.services.catalog_service import CatalogService
from ..dependencies import get_catalog_service
from ..schemas.catalog.catalog import WorkingHoursResponse, WorkingHoursUpsert
from ..schemas.common.common import MessageResponse

router = APIRouter(prefix="/working-hours", tags=["Working Hours"])


@router.post("/upsert", response_model=WorkingHoursResponse)
def upsert_working_hours(body: WorkingHoursUpsert, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.upsert_working_hours(body.doctor, body.day_of_week, body.start_time, body.end_time)


@router.get("", response_model=List[WorkingHoursResponse])
def list_working_hours(
    doctor: Optional[str] = None,
    day_of_week: Optional[int] = Query(None, ge=1, le=7),
    catalog: CatalogService = Depends(get_catalog_service),
):
    return catalog.list_working_hours(doctor, day_of_week)


@router.delete("", response_model=MessageResponse)
def delete_working_hours(
    doctor: str,
    day_of_week: int = Query(..., ge=1, le=7),
    catalog: CatalogService = Depends(get_catalog_service),
):
    return MessageResponse(message=catalog.delete_working_hours(doctor, day_of_week))
