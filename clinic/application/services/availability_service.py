import logging
from dataclasses import dataclass
from datetime import date, time
from typing import List

from ...db.models.enums import AppointmentStatus, VacationStatus
from ...exceptions import ConcurrencyException, DataNotFoundException
from ..ports.appointments_repo import AppointmentRepository
from ..ports.clock import Clock
from ..ports.doctor_repo import DoctorRepository
from ..ports.holiday_repo import HolidayRepository
from ..ports.investigation_repo import InvestigationRepository
from ..ports.vacation_repo import VacationRepository
from ..ports.working_hours_repo import WorkingHoursRepository
from .slot_calculator import SlotPolicy, compute_available_slots

logger = logging.getLogger(__name__)


@dataclass
class AvailabilityService:
    doctors: DoctorRepository
    investigations: InvestigationRepository
    working_hours: WorkingHoursRepository
    holidays: HolidayRepository
    vacations: VacationRepository
    appointments: AppointmentRepository
    clock: Clock
    slot_step: int = 30
    policy: SlotPolicy = SlotPolicy.MARGIN

    def get_available_hours(self, doctor_name: str, investigation_name: str, desired_date: date) -> List[time]:
        if desired_date < self.clock.current_date():
            raise ConcurrencyException(f"Can't look for available hours in the past: {desired_date}")

        doctor = self.doctors.find_active_by_name(doctor_name)
        if not doctor:
            raise DataNotFoundException(f"Doctor {doctor_name} not found")
        investigation = self.investigations.find_active_by_name(investigation_name)
        if not investigation:
            raise DataNotFoundException(f"Investigation {investigation_name} not found")

        hours = self.working_hours.find_by_doctor_and_day(doctor.id, desired_date.isoweekday())
        if not hours:
            raise DataNotFoundException(f"{doctor_name} is not working on {desired_date.strftime('%A')}")

        if self.holidays.is_holiday(desired_date):
            logger.info(f"{desired_date} is a holiday, no hours available")
            return []

        vacations = self.vacations.find_all_by_status(
            [VacationStatus.PLANNED, VacationStatus.IN_PROGRESS, VacationStatus.DONE],
            doctor_id=doctor.id,
        )
        if any(v.covers(desired_date) for v in vacations):
            logger.info(f"{doctor_name} is on vacation on {desired_date}, no hours available")
            return []

        booked = self.appointments.find_by_doctor_and_date(doctor.id, desired_date, status=AppointmentStatus.NEW)
        return compute_available_slots(hours, booked, investigation.duration, self.slot_step, self.policy)
