# clinic/db/models/scheduling/vacation.py
from typing import Optional
from datetime import date
from sqlmodel import SQLModel, Field, Relationship

from ..enums import VacationStatus, VacationType


class Vacation(SQLModel, table=True):
    __tablename__ = "vacations"
    id: Optional[int] = Field(default=None, primary_key=True)
    doctor_id: int = Field(foreign_key="doctors.id", index=True)
    start_date: date
    end_date: date
    type: VacationType = Field(default=VacationType.VACATION)
    status: VacationStatus = Field(default=VacationStatus.PLANNED)

    # Relationships
    doctor: Optional["Doctor"] = Relationship(back_populates="vacations")
