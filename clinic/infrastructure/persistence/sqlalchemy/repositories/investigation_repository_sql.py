from typing import List, Optional
from sqlmodel import Session, select

from .....db.models import Investigation
from .....application.ports.investigation_repo import InvestigationRepository, InvestigationDto
from .base import flush


class SqlInvestigationRepository(InvestigationRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, i: Investigation) -> InvestigationDto:
        return InvestigationDto(
            id=i.id,
            name=i.name,
            specialty_id=i.specialty_id,
            base_price=i.base_price,
            duration=i.duration,
            is_active=i.is_active,
            specialty_name=i.specialty.name if i.specialty else None,
        )

    def _apply(self, dto: InvestigationDto) -> Investigation:
        row = self.session.get(Investigation, dto.id) if dto.id is not None else None
        if row is None:
            row = Investigation(
                name=dto.name,
                specialty_id=dto.specialty_id,
                base_price=dto.base_price,
                duration=dto.duration,
                is_active=dto.is_active,
            )
        else:
            row.name = dto.name
            row.specialty_id = dto.specialty_id
            row.base_price = dto.base_price
            row.duration = dto.duration
            row.is_active = dto.is_active
        self.session.add(row)
        return row

    def find_active_by_name(self, name: str) -> Optional[InvestigationDto]:
        i = self.session.exec(
            select(Investigation).where(Investigation.name == name).where(Investigation.is_active == True)  # noqa: E712
        ).first()
        return self._to_dto(i) if i else None

    def find_active_by_id(self, investigation_id: int) -> Optional[InvestigationDto]:
        i = self.session.get(Investigation, investigation_id)
        return self._to_dto(i) if i and i.is_active else None

    def find_active_by_specialty(self, specialty_id: int) -> List[InvestigationDto]:
        rows = self.session.exec(
            select(Investigation)
            .where(Investigation.specialty_id == specialty_id)
            .where(Investigation.is_active == True)  # noqa: E712
            .order_by(Investigation.name)
        ).all()
        return [self._to_dto(r) for r in rows]

    def find_active_by_duration(self, duration: int) -> List[InvestigationDto]:
        rows = self.session.exec(
            select(Investigation)
            .where(Investigation.duration == duration)
            .where(Investigation.is_active == True)  # noqa: E712
            .order_by(Investigation.name)
        ).all()
        return [self._to_dto(r) for r in rows]

    def list_active(self) -> List[InvestigationDto]:
        rows = self.session.exec(
            select(Investigation).where(Investigation.is_active == True).order_by(Investigation.name)  # noqa: E712
        ).all()
        return [self._to_dto(r) for r in rows]

    def save(self, investigation: InvestigationDto) -> InvestigationDto:
        row = self._apply(investigation)
        flush(self.session)
        self.session.refresh(row)
        return self._to_dto(row)

    def save_all(self, investigations: List[InvestigationDto]) -> None:
        for investigation in investigations:
            self._apply(investigation)
        flush(self.session)
