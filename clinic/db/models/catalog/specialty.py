# clinic/db/models/catalog/specialty.py
from typing import Optional, List
from sqlmodel import SQLModel, Field, Relationship


class Specialty(SQLModel, table=True):
    __tablename__ = "specialties"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, unique=True, index=True)
    is_active: bool = Field(default=True)

    # Relationships
    doctors: List["Doctor"] = Relationship(back_populates="specialty")
    investigations: List["Investigation"] = Relationship(back_populates="specialty")
