from datetime import date
from fastapi import APIRouter, Depends, Query
import logging

from ..application.services.vacation_service import VacationService
from ..dependencies import get_clock, get_vacation_service
from ..exceptions import DataMismatchException
from ..infrastructure.clock.operational_clock import OperationalClock
from ..schemas.common.common import OperationalDateResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/operational-date", tags=["Operational Date"])


@router.get("", response_model=OperationalDateResponse)
def get_operational_date(clock: OperationalClock = Depends(get_clock)):
    return OperationalDateResponse(current_date=clock.current_date())


@router.post("/advance", response_model=OperationalDateResponse)
def advance_operational_date(
    days: int = Query(1, ge=0),
    clock: OperationalClock = Depends(get_clock),
    vacations: VacationService = Depends(get_vacation_service),
):
    today = clock.advance(days)
    updated = vacations.advance_statuses(today)
    return OperationalDateResponse(current_date=today, vacations_updated=updated)


@router.post("/set", response_model=OperationalDateResponse)
def set_operational_date(
    new_date: date = Query(..., alias="date"),
    clock: OperationalClock = Depends(get_clock),
    vacations: VacationService = Depends(get_vacation_service),
):
    try:
        today = clock.set_date(new_date)
    except ValueError as e:
        logger.warning(f"Operational date not changed: {e}")
        raise DataMismatchException(str(e))
    updated = vacations.advance_statuses(today)
    return OperationalDateResponse(current_date=today, vacations_updated=updated)
