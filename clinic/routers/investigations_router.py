from typing import Dict, List, Optional
from fastapi import APIRouter, Depends, Query

from ..application.services.catalog_service import CatalogService
from ..dependencies import get_catalog_service
from ..schemas.catalog.catalog import InvestigationResponse, InvestigationUpsert
from ..schemas.common.common import MessageResponse

router = APIRouter(prefix="/investigations", tags=["Investigations"])


@router.post("/upsert", response_model=InvestigationResponse)
def upsert_investigation(body: InvestigationUpsert, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.upsert_investigation(body.name, body.specialty, body.base_price, body.duration, investigation_id=body.id)


@router.get("", response_model=List[InvestigationResponse])
def list_investigations(catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.list_investigations()


@router.get("/pricing", response_model=Dict[str, Dict[str, float]])
def get_pricing(doctor: str, investigation: Optional[str] = None, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.get_investigation_pricing(doctor, investigation)


@router.get("/by-name", response_model=InvestigationResponse)
def get_investigation_by_name(name: str, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.get_investigation_by_name(name)


@router.get("/by-specialty", response_model=List[InvestigationResponse])
def list_investigations_by_specialty(specialty: str, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.list_investigations_by_specialty(specialty)


@router.get("/by-duration", response_model=List[InvestigationResponse])
def list_investigations_by_duration(duration: int = Query(..., gt=0), catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.list_investigations_by_duration(duration)


@router.delete("/by-name", response_model=MessageResponse)
def delete_investigation_by_name(name: str, catalog: CatalogService = Depends(get_catalog_service)):
    return MessageResponse(message=catalog.delete_investigation_by_name(name))


@router.get("/{investigation_id}", response_model=InvestigationResponse)
def get_investigation(investigation_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.get_investigation(investigation_id)


@router.delete("/{investigation_id}", response_model=MessageResponse)
def delete_investigation(investigation_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    return MessageResponse(message=catalog.delete_investigation(investigation_id))
