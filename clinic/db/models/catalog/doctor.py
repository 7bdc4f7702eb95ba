# clinic/db/models/catalog/doctor.py
from typing import Optional, List
from sqlmodel import SQLModel, Field, Relationship


class Doctor(SQLModel, table=True):
    __tablename__ = "doctors"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, unique=True, index=True)
    specialty_id: int = Field(foreign_key="specialties.id")
    price_rate: float = Field(default=0.0)  # percentage markup over investigation base price
    is_active: bool = Field(default=True)

    # Relationships
    specialty: Optional["Specialty"] = Relationship(back_populates="doctors")
    working_hours: List["WorkingHours"] = Relationship(back_populates="doctor")
    vacations: List["Vacation"] = Relationship(back_populates="doctor")
    appointments: List["Appointment"] = Relationship(back_populates="doctor")
