# clinic/schemas/common/common.py
from datetime import date
from typing import Optional
from pydantic import BaseModel

__all__ = ["MessageResponse", "IdResponse", "FlagResponse", "OperationalDateResponse"]


class MessageResponse(BaseModel):
    message: str


class IdResponse(BaseModel):
    id: int


class FlagResponse(BaseModel):
    value: bool


class OperationalDateResponse(BaseModel):
    current_date: date
    vacations_updated: Optional[int] = None
