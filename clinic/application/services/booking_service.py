import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import List, Optional

from ...db.models.enums import AppointmentStatus
from ...exceptions import ConcurrencyException, DataMismatchException, DataNotFoundException
from ..ports.appointments_repo import AppointmentDto, AppointmentRepository
from ..ports.clock import Clock
from ..ports.doctor_repo import DoctorDto, DoctorRepository
from ..ports.investigation_repo import InvestigationRepository
from ..ports.unit_of_work import UnitOfWork
from ..ports.locks import LockRegistry

logger = logging.getLogger(__name__)


def calculate_price(base_price: float, price_rate: float) -> float:
    return price_rate / 100 * base_price + base_price


@dataclass
class BookingService:
    doctors: DoctorRepository
    investigations: InvestigationRepository
    appointments: AppointmentRepository
    uow: UnitOfWork
    clock: Clock
    locks: LockRegistry

    def book_appointment(self, doctor_name: str, investigation_name: str, client_name: str, appointment_date: date, start_time: time) -> int:
        if appointment_date < self.clock.current_date():
            raise ConcurrencyException(f"Can't book an appointment in the past: {appointment_date}")

        doctor = self.doctors.find_active_by_name(doctor_name)
        if not doctor:
            raise DataNotFoundException(f"Doctor {doctor_name} not found")
        investigation = self.investigations.find_active_by_name(investigation_name)
        if not investigation:
            raise DataNotFoundException(f"Investigation {investigation_name} not found")

        start = datetime.combine(appointment_date, start_time)
        end = start + timedelta(minutes=investigation.duration)
        if end.date() != appointment_date:
            raise DataMismatchException(
                f"{investigation_name} starting at {start_time.strftime('%H:%M')} would end after midnight"
            )

        doctor_id = doctor.id
        with self.locks.hold(doctor_id):
            with self.uow:
                doctor = self.doctors.lock(doctor_id)
                if not doctor:
                    logger.warning(f"Booking failed: {doctor_name} was deactivated")
                    raise DataNotFoundException(f"Doctor {doctor_name} not found")
                if self.appointments.exists_overlap(doctor.id, appointment_date, start_time, end.time()):
                    raise ConcurrencyException(
                        f"{doctor_name} is not available at {start_time.strftime('%H:%M')} on {appointment_date}, "
                        f"please select a different hour"
                    )
                saved = self.appointments.save(AppointmentDto(
                    id=None,
                    doctor_id=doctor.id,
                    investigation_id=investigation.id,
                    client_name=client_name,
                    appointment_date=appointment_date,
                    start_time=start_time,
                    end_time=end.time(),
                    price=calculate_price(investigation.base_price, doctor.price_rate),
                    status=AppointmentStatus.NEW,
                ))
                self.uow.commit()

        logger.info(f"Appointment {saved.id} booked for {client_name} with {doctor_name} on {appointment_date} at {start_time}")
        return saved.id

    def cancel_appointment_by_id_and_client(self, appointment_id: int, client_name: str) -> str:
        with self.uow:
            appt = self.appointments.find_by_id_and_client_and_status(appointment_id, client_name, AppointmentStatus.NEW)
            if not appt:
                logger.warning(f"Cancel failed: no active appointment {appointment_id} for {client_name}")
                raise DataNotFoundException(f"No such appointments for {client_name}")
            appt.status = AppointmentStatus.CANCELED
            self.appointments.save(appt)
            self.uow.commit()
        logger.info(f"Appointment {appointment_id} canceled by {client_name}")
        return "Appointment successfully canceled"

    def cancel_all_appointments_for_doctor(self, doctor: DoctorDto) -> str:
        """Cancel every NEW appointment of ``doctor``.

        Runs inside the caller's unit of work and leaves the commit to it.
        """
        pending = [a for a in self.appointments.find_all_by_doctor(doctor.id) if a.status == AppointmentStatus.NEW]
        for appt in pending:
            appt.status = AppointmentStatus.CANCELED
        self.appointments.save_all(pending)
        return f"Appointments for {doctor.name} canceled ({len(pending)})"

    def get_appointment(self, appointment_id: int) -> AppointmentDto:
        appt = self.appointments.get_by_id(appointment_id)
        if not appt:
            raise DataNotFoundException("Wrong ID")
        return appt

    def list_appointments(self, doctor_name: str, appointment_date: Optional[date] = None) -> List[AppointmentDto]:
        doctor = self.doctors.find_active_by_name(doctor_name)
        if not doctor:
            raise DataNotFoundException(f"Doctor {doctor_name} not found")
        if appointment_date is not None:
            rows = self.appointments.find_by_doctor_and_date(doctor.id, appointment_date)
        else:
            rows = self.appointments.find_all_by_doctor(doctor.id)
        return sorted(rows, key=lambda a: (a.appointment_date, a.start_time))
