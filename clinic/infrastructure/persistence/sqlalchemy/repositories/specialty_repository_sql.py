from typing import List, Optional
from sqlmodel import Session, select

from .....db.models import Specialty
from .....application.ports.specialty_repo import SpecialtyRepository, SpecialtyDto
from .base import flush


class SqlSpecialtyRepository(SpecialtyRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, s: Specialty) -> SpecialtyDto:
        return SpecialtyDto(id=s.id, name=s.name, is_active=s.is_active)

    def find_active_by_name(self, name: str) -> Optional[SpecialtyDto]:
        s = self.session.exec(
            select(Specialty).where(Specialty.name == name).where(Specialty.is_active == True)  # noqa: E712
        ).first()
        return self._to_dto(s) if s else None

    def find_active_by_id(self, specialty_id: int) -> Optional[SpecialtyDto]:
        s = self.session.get(Specialty, specialty_id)
        return self._to_dto(s) if s and s.is_active else None

    def list_active(self) -> List[SpecialtyDto]:
        rows = self.session.exec(
            select(Specialty).where(Specialty.is_active == True).order_by(Specialty.name)  # noqa: E712
        ).all()
        return [self._to_dto(r) for r in rows]

    def save(self, specialty: SpecialtyDto) -> SpecialtyDto:
        row = self.session.get(Specialty, specialty.id) if specialty.id is not None else None
        if row is None:
            row = Specialty(name=specialty.name, is_active=specialty.is_active)
        else:
            row.name = specialty.name
            row.is_active = specialty.is_active
        self.session.add(row)
        flush(self.session)
        self.session.refresh(row)
        return self._to_dto(row)
