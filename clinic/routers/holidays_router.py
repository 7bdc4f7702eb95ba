from datetime import date
from typing import List
from fastapi import APIRouter, Depends, Query

from ..application.services.catalog_service import CatalogService
from ..dependencies import get_catalog_service
from ..schemas.catalog.catalog import HolidayResponse, HolidayUpsert
from ..schemas.common.common import FlagResponse, MessageResponse

router = APIRouter(prefix="/holidays", tags=["Holidays"])


@router.post("/upsert", response_model=HolidayResponse)
def upsert_holiday(body: HolidayUpsert, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.upsert_holiday(body.start_date, body.end_date, body.description, holiday_id=body.id)


@router.get("", response_model=List[HolidayResponse])
def list_holidays(catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.list_holidays()


@router.get("/is-holiday", response_model=FlagResponse)
def is_holiday(day: date = Query(..., alias="date"), catalog: CatalogService = Depends(get_catalog_service)):
    return FlagResponse(value=catalog.is_holiday(day))


@router.get("/by-description", response_model=HolidayResponse)
def get_holiday_by_description(description: str, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.get_holiday_by_description(description)


@router.delete("/by-description", response_model=MessageResponse)
def delete_holiday_by_description(description: str, catalog: CatalogService = Depends(get_catalog_service)):
    return MessageResponse(message=catalog.delete_holiday_by_description(description))


@router.get("/{holiday_id}", response_model=HolidayResponse)
def get_holiday(holiday_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.get_holiday(holiday_id)


@router.delete("/{holiday_id}", response_model=MessageResponse)
def delete_holiday(holiday_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    return MessageResponse(message=catalog.delete_holiday(holiday_id))
