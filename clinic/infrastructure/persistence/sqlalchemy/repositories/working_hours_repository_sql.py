from typing import List, Optional
from sqlmodel import Session, select

from .....db.models import WorkingHours
from .....application.ports.working_hours_repo import WorkingHoursRepository, WorkingHoursDto
from .base import flush


class SqlWorkingHoursRepository(WorkingHoursRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, w: WorkingHours) -> WorkingHoursDto:
        return WorkingHoursDto(
            id=w.id,
            doctor_id=w.doctor_id,
            day_of_week=w.day_of_week,
            start_time=w.start_time,
            end_time=w.end_time,
            doctor_name=w.doctor.name if w.doctor else None,
        )

    def find_by_doctor_and_day(self, doctor_id: int, day_of_week: int) -> Optional[WorkingHoursDto]:
        w = self.session.exec(
            select(WorkingHours)
            .where(WorkingHours.doctor_id == doctor_id)
            .where(WorkingHours.day_of_week == day_of_week)
        ).first()
        return self._to_dto(w) if w else None

    def find_all(self, doctor_id: Optional[int] = None, day_of_week: Optional[int] = None) -> List[WorkingHoursDto]:
        query = select(WorkingHours)
        if doctor_id is not None:
            query = query.where(WorkingHours.doctor_id == doctor_id)
        if day_of_week is not None:
            query = query.where(WorkingHours.day_of_week == day_of_week)
        rows = self.session.exec(query.order_by(WorkingHours.doctor_id, WorkingHours.day_of_week)).all()
        return [self._to_dto(r) for r in rows]

    def save(self, working_hours: WorkingHoursDto) -> WorkingHoursDto:
        row = self.session.get(WorkingHours, working_hours.id) if working_hours.id is not None else None
        if row is None:
            row = WorkingHours(
                doctor_id=working_hours.doctor_id,
                day_of_week=working_hours.day_of_week,
                start_time=working_hours.start_time,
                end_time=working_hours.end_time,
            )
        else:
            row.start_time = working_hours.start_time
            row.end_time = working_hours.end_time
        self.session.add(row)
        flush(self.session)
        self.session.refresh(row)
        return self._to_dto(row)

    def _delete_rows(self, rows: List[WorkingHours]) -> int:
        for row in rows:
            self.session.delete(row)
        flush(self.session)
        return len(rows)

    def delete_for_doctor_and_day(self, doctor_id: int, day_of_week: int) -> int:
        rows = self.session.exec(
            select(WorkingHours)
            .where(WorkingHours.doctor_id == doctor_id)
            .where(WorkingHours.day_of_week == day_of_week)
        ).all()
        return self._delete_rows(rows)

    def delete_all_for_doctor(self, doctor_id: int) -> int:
        rows = self.session.exec(select(WorkingHours).where(WorkingHours.doctor_id == doctor_id)).all()
        return self._delete_rows(rows)
