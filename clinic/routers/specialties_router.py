from typing import List
from fastapi import APIRouter, Depends

from ..application.services.cascade_service import CascadeService
from ..application.services.catalog_service import CatalogService
from ..dependencies import get_cascade_service, get_catalog_service
from ..schemas.catalog.catalog import SpecialtyResponse, SpecialtyUpsert
from ..schemas.common.common import MessageResponse

router = APIRouter(prefix="/specialties", tags=["Specialties"])


@router.post("/upsert", response_model=SpecialtyResponse)
def upsert_specialty(body: SpecialtyUpsert, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.upsert_specialty(body.name, specialty_id=body.id)


@router.get("", response_model=List[SpecialtyResponse])
def list_specialties(catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.list_specialties()


@router.get("/by-name", response_model=SpecialtyResponse)
def get_specialty_by_name(name: str, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.get_specialty_by_name(name)


@router.delete("/by-name", response_model=MessageResponse)
def delete_specialty_by_name(name: str, cascade: CascadeService = Depends(get_cascade_service)):
    return MessageResponse(message=cascade.deactivate_specialty(name))


@router.get("/{specialty_id}", response_model=SpecialtyResponse)
def get_specialty(specialty_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.get_specialty(specialty_id)


@router.delete("/{specialty_id}", response_model=MessageResponse)
def delete_specialty(specialty_id: int, cascade: CascadeService = Depends(get_cascade_service)):
    return MessageResponse(message=cascade.deactivate_specialty_by_id(specialty_id))
