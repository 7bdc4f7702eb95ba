# clinic/db/models/catalog/holiday.py
from typing import Optional
from datetime import date
from sqlmodel import SQLModel, Field


class Holiday(SQLModel, table=True):
    __tablename__ = "holidays"
    id: Optional[int] = Field(default=None, primary_key=True)
    start_date: date = Field(index=True)
    end_date: date = Field(index=True)
    description: str = Field(max_length=255, index=True)
    is_active: bool = Field(default=True)
