# clinic/schemas/appointments/appointment.py
from datetime import date, datetime, time
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ...db.models.enums import AppointmentStatus

__all__ = ["AppointmentBookRequest", "AppointmentResponse", "AvailableHoursResponse"]


class AppointmentBookRequest(BaseModel):
    client_name: str = Field(min_length=1, max_length=100)
    doctor: str = Field(min_length=1)
    investigation: str = Field(min_length=1)
    date: date
    start_hour: time


class AppointmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    doctor_id: int
    doctor_name: Optional[str] = None
    investigation_id: int
    investigation_name: Optional[str] = None
    client_name: str
    appointment_date: date
    start_time: time
    end_time: time
    price: float
    status: AppointmentStatus
    created_at: Optional[datetime] = None


class AvailableHoursResponse(BaseModel):
    doctor: str
    investigation: str
    date: date
    hours: List[time]
