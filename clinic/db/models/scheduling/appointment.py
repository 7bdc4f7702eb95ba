# clinic/db/models/scheduling/appointment.py
from typing import Optional
from datetime import date, time, datetime, timezone
from sqlmodel import SQLModel, Field, Relationship

from ..enums import AppointmentStatus


class Appointment(SQLModel, table=True):
    __tablename__ = "appointments"
    id: Optional[int] = Field(default=None, primary_key=True)
    doctor_id: int = Field(foreign_key="doctors.id", index=True)
    investigation_id: int = Field(foreign_key="investigations.id")
    client_name: str = Field(max_length=100)
    appointment_date: date = Field(index=True)
    start_time: time
    end_time: time
    price: float
    status: AppointmentStatus = Field(default=AppointmentStatus.NEW)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationships
    doctor: Optional["Doctor"] = Relationship(back_populates="appointments")
    investigation: Optional["Investigation"] = Relationship(back_populates="appointments")
