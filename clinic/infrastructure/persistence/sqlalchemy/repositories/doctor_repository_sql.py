from typing import List, Optional
from sqlmodel import Session, select

from .....db.models import Doctor
from .....application.ports.doctor_repo import DoctorRepository, DoctorDto
from .base import flush


class SqlDoctorRepository(DoctorRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, d: Doctor) -> DoctorDto:
        return DoctorDto(
            id=d.id,
            name=d.name,
            specialty_id=d.specialty_id,
            price_rate=d.price_rate,
            is_active=d.is_active,
            specialty_name=d.specialty.name if d.specialty else None,
        )

    def _apply(self, dto: DoctorDto) -> Doctor:
        row = self.session.get(Doctor, dto.id) if dto.id is not None else None
        if row is None:
            row = Doctor(name=dto.name, specialty_id=dto.specialty_id, price_rate=dto.price_rate, is_active=dto.is_active)
        else:
            row.name = dto.name
            row.specialty_id = dto.specialty_id
            row.price_rate = dto.price_rate
            row.is_active = dto.is_active
        self.session.add(row)
        return row

    def find_active_by_name(self, name: str) -> Optional[DoctorDto]:
        d = self.session.exec(
            select(Doctor).where(Doctor.name == name).where(Doctor.is_active == True)  # noqa: E712
        ).first()
        return self._to_dto(d) if d else None

    def find_active_by_id(self, doctor_id: int) -> Optional[DoctorDto]:
        d = self.session.get(Doctor, doctor_id)
        return self._to_dto(d) if d and d.is_active else None

    def find_active_by_specialty(self, specialty_id: int) -> List[DoctorDto]:
        rows = self.session.exec(
            select(Doctor)
            .where(Doctor.specialty_id == specialty_id)
            .where(Doctor.is_active == True)  # noqa: E712
            .order_by(Doctor.name)
        ).all()
        return [self._to_dto(r) for r in rows]

    def list_active(self) -> List[DoctorDto]:
        rows = self.session.exec(
            select(Doctor).where(Doctor.is_active == True).order_by(Doctor.name)  # noqa: E712
        ).all()
        return [self._to_dto(r) for r in rows]

    def lock(self, doctor_id: int) -> Optional[DoctorDto]:
        # FOR UPDATE is dropped by the SQLite dialect; the in-process lock covers that case
        d = self.session.exec(
            select(Doctor)
            .where(Doctor.id == doctor_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        ).first()
        return self._to_dto(d) if d and d.is_active else None

    def save(self, doctor: DoctorDto) -> DoctorDto:
        row = self._apply(doctor)
        flush(self.session)
        self.session.refresh(row)
        return self._to_dto(row)

    def save_all(self, doctors: List[DoctorDto]) -> None:
        for doctor in doctors:
            self._apply(doctor)
        flush(self.session)
