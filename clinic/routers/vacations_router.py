from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from ..application.services.vacation_service import VacationService
from ..db.models.enums import VacationStatus, VacationType
from ..dependencies import get_vacation_service
from ..exceptions import ClinicException
from ..schemas.common.common import FlagResponse, IdResponse
from ..schemas.vacations.vacation import VacationCreate, VacationResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vacations", tags=["Vacations"])


@router.post("/insert", response_model=IdResponse)
def insert_vacation(
    body: VacationCreate,
    vacations: VacationService = Depends(get_vacation_service),
):
    try:
        return IdResponse(id=vacations.insert_vacation(body.doctor, body.start_date, body.end_date, body.type))
    except ClinicException:
        raise
    except Exception as e:
        logger.error(f"Error inserting vacation: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to insert vacation")


@router.post("/update-status", response_model=IdResponse)
def cancel_vacation(
    doctor: str,
    start_date: date,
    vacations: VacationService = Depends(get_vacation_service),
):
    try:
        return IdResponse(id=vacations.cancel_vacation(doctor, start_date))
    except ClinicException:
        raise
    except Exception as e:
        logger.error(f"Error canceling vacation: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to cancel vacation")


@router.get("/by-doctor-and-dates", response_model=List[VacationResponse])
def list_by_doctor_and_dates(
    doctor: str,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    vacations: VacationService = Depends(get_vacation_service),
):
    return vacations.list_by_doctor_and_dates(doctor, start_date, end_date)


@router.get("/by-doctor-and-type", response_model=List[VacationResponse])
def list_by_type(
    vacation_type: VacationType = Query(..., alias="type"),
    doctor: Optional[str] = None,
    vacations: VacationService = Depends(get_vacation_service),
):
    return vacations.list_by_type(vacation_type, doctor)


@router.get("/by-doctor-and-status", response_model=List[VacationResponse])
def list_by_status(
    doctor: str,
    status: VacationStatus,
    vacations: VacationService = Depends(get_vacation_service),
):
    return vacations.list_by_status(doctor, status)


@router.get("/is-vacation", response_model=FlagResponse)
def is_vacation(
    doctor: str,
    day: date = Query(..., alias="date"),
    vacations: VacationService = Depends(get_vacation_service),
):
    return FlagResponse(value=vacations.is_on_vacation(doctor, day))
