from datetime import date
from typing import List, Optional
from sqlmodel import Session, select

from .....db.models import Holiday
from .....application.ports.holiday_repo import HolidayRepository, HolidayDto
from .base import flush


class SqlHolidayRepository(HolidayRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, h: Holiday) -> HolidayDto:
        return HolidayDto(
            id=h.id,
            start_date=h.start_date,
            end_date=h.end_date,
            description=h.description,
            is_active=h.is_active,
        )

    def is_holiday(self, day: date) -> bool:
        h = self.session.exec(
            select(Holiday)
            .where(Holiday.is_active == True)  # noqa: E712
            .where(Holiday.start_date <= day)
            .where(Holiday.end_date >= day)
        ).first()
        return h is not None

    def find_active_by_id(self, holiday_id: int) -> Optional[HolidayDto]:
        h = self.session.get(Holiday, holiday_id)
        return self._to_dto(h) if h and h.is_active else None

    def find_active_by_description(self, description: str) -> Optional[HolidayDto]:
        h = self.session.exec(
            select(Holiday).where(Holiday.description == description).where(Holiday.is_active == True)  # noqa: E712
        ).first()
        return self._to_dto(h) if h else None

    def list_active(self) -> List[HolidayDto]:
        rows = self.session.exec(
            select(Holiday).where(Holiday.is_active == True).order_by(Holiday.start_date)  # noqa: E712
        ).all()
        return [self._to_dto(r) for r in rows]

    def save(self, holiday: HolidayDto) -> HolidayDto:
        row = self.session.get(Holiday, holiday.id) if holiday.id is not None else None
        if row is None:
            row = Holiday(
                start_date=holiday.start_date,
                end_date=holiday.end_date,
                description=holiday.description,
                is_active=holiday.is_active,
            )
        else:
            row.start_date = holiday.start_date
            row.end_date = holiday.end_date
            row.description = holiday.description
            row.is_active = holiday.is_active
        self.session.add(row)
        flush(self.session)
        self.session.refresh(row)
        return self._to_dto(row)
