from datetime import date, time
from typing import List, Optional
from sqlmodel import Session, select

from .....db.models import Appointment, AppointmentStatus
from .....application.ports.appointments_repo import AppointmentRepository, AppointmentDto
from .base import flush


class SqlAppointmentRepository(AppointmentRepository):
    def __init__(self, session: Session):
        self.session = session

    def _appt_to_dto(self, a: Appointment) -> AppointmentDto:
        return AppointmentDto(
            id=a.id,
            doctor_id=a.doctor_id,
            investigation_id=a.investigation_id,
            client_name=a.client_name,
            appointment_date=a.appointment_date,
            start_time=a.start_time,
            end_time=a.end_time,
            price=a.price,
            status=a.status,
            doctor_name=a.doctor.name if a.doctor else None,
            investigation_name=a.investigation.name if a.investigation else None,
            created_at=a.created_at,
        )

    def _apply(self, dto: AppointmentDto) -> Appointment:
        row = self.session.get(Appointment, dto.id) if dto.id is not None else None
        if row is None:
            row = Appointment(
                doctor_id=dto.doctor_id,
                investigation_id=dto.investigation_id,
                client_name=dto.client_name,
                appointment_date=dto.appointment_date,
                start_time=dto.start_time,
                end_time=dto.end_time,
                price=dto.price,
                status=dto.status,
            )
        else:
            # Everything but the status is frozen once booked
            row.status = dto.status
        self.session.add(row)
        return row

    def find_by_doctor_and_date(self, doctor_id: int, appointment_date: date, status: Optional[AppointmentStatus] = None) -> List[AppointmentDto]:
        query = (
            select(Appointment)
            .where(Appointment.doctor_id == doctor_id)
            .where(Appointment.appointment_date == appointment_date)
        )
        if status is not None:
            query = query.where(Appointment.status == status)
        rows = self.session.exec(query.order_by(Appointment.start_time)).all()
        return [self._appt_to_dto(r) for r in rows]

    def exists_overlap(self, doctor_id: int, appointment_date: date, start_time: time, end_time: time) -> bool:
        existing = self.session.exec(
            select(Appointment)
            .where(Appointment.doctor_id == doctor_id)
            .where(Appointment.appointment_date == appointment_date)
            .where(Appointment.status == AppointmentStatus.NEW)
            .where(Appointment.start_time < end_time)
            .where(Appointment.end_time > start_time)
        ).first()
        return existing is not None

    def find_by_id_and_client_and_status(self, appointment_id: int, client_name: str, status: AppointmentStatus) -> Optional[AppointmentDto]:
        a = self.session.exec(
            select(Appointment)
            .where(Appointment.id == appointment_id)
            .where(Appointment.client_name == client_name)
            .where(Appointment.status == status)
        ).first()
        return self._appt_to_dto(a) if a else None

    def find_all_by_doctor(self, doctor_id: int) -> List[AppointmentDto]:
        rows = self.session.exec(
            select(Appointment)
            .where(Appointment.doctor_id == doctor_id)
            .order_by(Appointment.appointment_date, Appointment.start_time)
        ).all()
        return [self._appt_to_dto(r) for r in rows]

    def get_by_id(self, appointment_id: int) -> Optional[AppointmentDto]:
        a = self.session.get(Appointment, appointment_id)
        return self._appt_to_dto(a) if a else None

    def save(self, appointment: AppointmentDto) -> AppointmentDto:
        row = self._apply(appointment)
        flush(self.session)
        self.session.refresh(row)
        return self._appt_to_dto(row)

    def save_all(self, appointments: List[AppointmentDto]) -> None:
        for appointment in appointments:
            self._apply(appointment)
        flush(self.session)
