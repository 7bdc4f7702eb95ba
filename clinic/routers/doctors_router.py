from typing import List
from fastapi import APIRouter, Depends
import logging

from ..application.services.cascade_service import CascadeService
from ..application.services.catalog_service import CatalogService
from ..dependencies import get_cascade_service, get_catalog_service
from ..schemas.catalog.catalog import DoctorResponse, DoctorUpsert
from ..schemas.common.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/doctors", tags=["Doctors"])


@router.post("/upsert", response_model=DoctorResponse)
def upsert_doctor(body: DoctorUpsert, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.upsert_doctor(body.name, body.specialty, body.price_rate, doctor_id=body.id)


@router.get("", response_model=List[DoctorResponse])
def list_doctors(catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.list_doctors()


@router.get("/by-specialty", response_model=List[DoctorResponse])
def list_doctors_by_specialty(specialty: str, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.list_doctors_by_specialty(specialty)


@router.get("/by-name", response_model=DoctorResponse)
def get_doctor_by_name(name: str, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.get_doctor_by_name(name)


@router.delete("/by-name", response_model=MessageResponse)
def delete_doctor_by_name(name: str, cascade: CascadeService = Depends(get_cascade_service)):
    return MessageResponse(message=cascade.deactivate_doctor(name))


@router.get("/{doctor_id}", response_model=DoctorResponse)
def get_doctor(doctor_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.get_doctor(doctor_id)


@router.delete("/{doctor_id}", response_model=MessageResponse)
def delete_doctor(doctor_id: int, cascade: CascadeService = Depends(get_cascade_service)):
    return MessageResponse(message=cascade.deactivate_doctor_by_id(doctor_id))
