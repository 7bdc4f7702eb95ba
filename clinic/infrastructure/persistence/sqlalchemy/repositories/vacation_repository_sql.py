from datetime import date
from typing import Iterable, List, Optional
from sqlmodel import Session, select

from .....db.models import Vacation, VacationStatus, VacationType
from .....application.ports.vacation_repo import VacationRepository, VacationDto
from .base import flush


class SqlVacationRepository(VacationRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, v: Vacation) -> VacationDto:
        return VacationDto(
            id=v.id,
            doctor_id=v.doctor_id,
            start_date=v.start_date,
            end_date=v.end_date,
            type=v.type,
            status=v.status,
            doctor_name=v.doctor.name if v.doctor else None,
        )

    def _apply(self, dto: VacationDto) -> Vacation:
        row = self.session.get(Vacation, dto.id) if dto.id is not None else None
        if row is None:
            row = Vacation(
                doctor_id=dto.doctor_id,
                start_date=dto.start_date,
                end_date=dto.end_date,
                type=dto.type,
                status=dto.status,
            )
        else:
            row.start_date = dto.start_date
            row.end_date = dto.end_date
            row.type = dto.type
            row.status = dto.status
        self.session.add(row)
        return row

    def _listed(self, query) -> List[VacationDto]:
        rows = self.session.exec(query.order_by(Vacation.start_date)).all()
        return [self._to_dto(r) for r in rows]

    def exists_overlap(self, start_date: date, end_date: date, doctor_id: Optional[int] = None) -> bool:
        query = (
            select(Vacation)
            .where(Vacation.status != VacationStatus.CANCELED)
            .where(Vacation.start_date <= end_date)
            .where(Vacation.end_date >= start_date)
        )
        if doctor_id is not None:
            query = query.where(Vacation.doctor_id == doctor_id)
        return self.session.exec(query).first() is not None

    def find_by_doctor_and_start_date(self, doctor_id: int, start_date: date) -> Optional[VacationDto]:
        v = self.session.exec(
            select(Vacation)
            .where(Vacation.doctor_id == doctor_id)
            .where(Vacation.start_date == start_date)
            .where(Vacation.status != VacationStatus.CANCELED)
        ).first()
        return self._to_dto(v) if v else None

    def find_all_by_doctor(self, doctor_id: int) -> List[VacationDto]:
        return self._listed(select(Vacation).where(Vacation.doctor_id == doctor_id))

    def find_all_by_status(self, statuses: Iterable[VacationStatus], doctor_id: Optional[int] = None) -> List[VacationDto]:
        query = select(Vacation).where(Vacation.status.in_(list(statuses)))
        if doctor_id is not None:
            query = query.where(Vacation.doctor_id == doctor_id)
        return self._listed(query)

    def find_all_by_type(self, vacation_type: VacationType, doctor_id: Optional[int] = None) -> List[VacationDto]:
        query = select(Vacation).where(Vacation.type == vacation_type)
        if doctor_id is not None:
            query = query.where(Vacation.doctor_id == doctor_id)
        return self._listed(query)

    def find_all_by_doctor_within(self, doctor_id: int, start_date: Optional[date], end_date: Optional[date]) -> List[VacationDto]:
        query = select(Vacation).where(Vacation.doctor_id == doctor_id)
        if start_date is not None:
            query = query.where(Vacation.start_date >= start_date)
        if end_date is not None:
            query = query.where(Vacation.end_date <= end_date)
        return self._listed(query)

    def save(self, vacation: VacationDto) -> VacationDto:
        row = self._apply(vacation)
        flush(self.session)
        self.session.refresh(row)
        return self._to_dto(row)

    def save_all(self, vacations: List[VacationDto]) -> None:
        for vacation in vacations:
            self._apply(vacation)
        flush(self.session)
