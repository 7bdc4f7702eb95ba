# clinic/db/models/catalog/investigation.py
from typing import Optional, List
from sqlmodel import SQLModel, Field, Relationship


class Investigation(SQLModel, table=True):
    __tablename__ = "investigations"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, unique=True, index=True)
    specialty_id: int = Field(foreign_key="specialties.id")
    base_price: float
    duration: int  # minutes
    is_active: bool = Field(default=True)

    # Relationships
    specialty: Optional["Specialty"] = Relationship(back_populates="investigations")
    appointments: List["Appointment"] = Relationship(back_populates="investigation")
