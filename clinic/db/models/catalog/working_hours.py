# clinic/db/models/catalog/working_hours.py
from typing import Optional
from datetime import time
from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field, Relationship


class WorkingHours(SQLModel, table=True):
    __tablename__ = "working_hours"
    __table_args__ = (UniqueConstraint("doctor_id", "day_of_week", name="uq_working_hours_doctor_day"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    doctor_id: int = Field(foreign_key="doctors.id", index=True)
    day_of_week: int  # 1-7 (Monday-Sunday)
    start_time: time
    end_time: time

    # Relationships
    doctor: Optional["Doctor"] = Relationship(back_populates="working_hours")
