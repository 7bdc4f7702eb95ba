# clinic/schemas/vacations/vacation.py
from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from ...db.models.enums import VacationStatus, VacationType

__all__ = ["VacationCreate", "VacationResponse"]


class VacationCreate(BaseModel):
    doctor: str = Field(min_length=1)
    start_date: date
    end_date: date
    type: VacationType = VacationType.VACATION


class VacationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    doctor_id: int
    doctor_name: Optional[str] = None
    start_date: date
    end_date: date
    type: VacationType
    status: VacationStatus
