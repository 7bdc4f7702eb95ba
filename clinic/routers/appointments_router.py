from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from ..application.services.availability_service import AvailabilityService
from ..application.services.booking_service import BookingService
from ..dependencies import get_availability_service, get_booking_service
from ..exceptions import ClinicException
from ..schemas.appointments.appointment import AppointmentBookRequest, AppointmentResponse, AvailableHoursResponse
from ..schemas.common.common import IdResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.get("/available-hours", response_model=AvailableHoursResponse)
def get_available_hours(
    doctor: str,
    investigation: str,
    desired_date: date = Query(..., alias="date"),
    availability: AvailabilityService = Depends(get_availability_service),
):
    hours = availability.get_available_hours(doctor, investigation, desired_date)
    return AvailableHoursResponse(doctor=doctor, investigation=investigation, date=desired_date, hours=hours)


@router.post("/book", response_model=IdResponse)
def book_appointment(
    body: AppointmentBookRequest,
    booking: BookingService = Depends(get_booking_service),
):
    try:
        appointment_id = booking.book_appointment(body.doctor, body.investigation, body.client_name, body.date, body.start_hour)
        return IdResponse(id=appointment_id)
    except ClinicException:
        raise
    except Exception as e:
        logger.error(f"Error booking appointment: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to book appointment")


@router.post("/cancel-book", response_model=MessageResponse)
def cancel_appointment(
    appointment_id: int = Query(..., alias="id"),
    client_name: str = Query(...),
    booking: BookingService = Depends(get_booking_service),
):
    try:
        return MessageResponse(message=booking.cancel_appointment_by_id_and_client(appointment_id, client_name))
    except ClinicException:
        raise
    except Exception as e:
        logger.error(f"Error canceling appointment {appointment_id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to cancel appointment")


@router.get("", response_model=List[AppointmentResponse])
def list_appointments(
    doctor: str,
    appointment_date: Optional[date] = Query(None, alias="date"),
    booking: BookingService = Depends(get_booking_service),
):
    return booking.list_appointments(doctor, appointment_date)


@router.get("/{appointment_id}", response_model=AppointmentResponse)
def get_appointment(
    appointment_id: int,
    booking: BookingService = Depends(get_booking_service),
):
    return booking.get_appointment(appointment_id)
