# clinic/schemas/catalog/catalog.py
from datetime import date, time
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

__all__ = [
    "SpecialtyUpsert", "SpecialtyResponse",
    "DoctorUpsert", "DoctorResponse",
    "InvestigationUpsert", "InvestigationResponse",
    "WorkingHoursUpsert", "WorkingHoursResponse",
    "HolidayUpsert", "HolidayResponse",
]


class SpecialtyUpsert(BaseModel):
    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=100)


class SpecialtyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class DoctorUpsert(BaseModel):
    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=100)
    specialty: str = Field(min_length=1)
    price_rate: float = Field(default=0.0, ge=0)


class DoctorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    specialty_id: int
    specialty_name: Optional[str] = None
    price_rate: float


class InvestigationUpsert(BaseModel):
    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=100)
    specialty: str = Field(min_length=1)
    base_price: float = Field(ge=0)
    duration: int = Field(gt=0)  # minutes


class InvestigationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    specialty_id: int
    specialty_name: Optional[str] = None
    base_price: float
    duration: int


class WorkingHoursUpsert(BaseModel):
    doctor: str = Field(min_length=1)
    day_of_week: int = Field(ge=1, le=7)  # ISO, Monday=1
    start_time: time
    end_time: time

    @model_validator(mode="after")
    def check_window(self):
        if self.start_time >= self.end_time:
            raise ValueError("start_time must be before end_time")
        return self


class WorkingHoursResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    doctor_id: int
    doctor_name: Optional[str] = None
    day_of_week: int
    start_time: time
    end_time: time


class HolidayUpsert(BaseModel):
    id: Optional[int] = None
    start_date: date
    end_date: date
    description: str = Field(min_length=1, max_length=255)

    @model_validator(mode="after")
    def check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class HolidayResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    start_date: date
    end_date: date
    description: str
