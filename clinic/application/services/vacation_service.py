import enum
import logging
from contextlib import ExitStack
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ...db.models.enums import VacationStatus, VacationType
from ...exceptions import ConcurrencyException, DataMismatchException, DataNotFoundException
from ..ports.clock import Clock
from ..ports.doctor_repo import DoctorDto, DoctorRepository
from ..ports.locks import LockRegistry
from ..ports.unit_of_work import UnitOfWork
from ..ports.vacation_repo import VacationDto, VacationRepository

logger = logging.getLogger(__name__)

# Lock key shared by every vacation insert when overlaps are checked clinic-wide
CLINIC_VACATIONS_KEY = "vacations"


class VacationOverlapScope(str, enum.Enum):
    DOCTOR = "doctor"
    CLINIC = "clinic"


def transition(vacation: VacationDto, target: VacationStatus) -> VacationDto:
    if not vacation.status.can_transition_to(target):
        raise ConcurrencyException(
            f"Vacation starting {vacation.start_date} can't move from {vacation.status.value} to {target.value}"
        )
    vacation.status = target
    return vacation


@dataclass
class VacationService:
    doctors: DoctorRepository
    vacations: VacationRepository
    uow: UnitOfWork
    clock: Clock
    locks: LockRegistry
    overlap_scope: VacationOverlapScope = VacationOverlapScope.DOCTOR

    def _doctor(self, doctor_name: str) -> DoctorDto:
        doctor = self.doctors.find_active_by_name(doctor_name)
        if not doctor:
            raise DataNotFoundException(f"Doctor {doctor_name} not found")
        return doctor

    def insert_vacation(self, doctor_name: str, start_date: date, end_date: date, vacation_type: VacationType) -> int:
        doctor = self._doctor(doctor_name)
        if start_date < self.clock.current_date():
            raise ConcurrencyException("Can't plan vacations in the past")
        if end_date < start_date:
            raise DataMismatchException(f"Vacation end {end_date} is before its start {start_date}")

        scope_id = doctor.id if self.overlap_scope == VacationOverlapScope.DOCTOR else None
        with ExitStack() as held:
            if scope_id is None:
                held.enter_context(self.locks.hold(CLINIC_VACATIONS_KEY))
            held.enter_context(self.locks.hold(doctor.id))
            with self.uow:
                if not self.doctors.lock(doctor.id):
                    logger.warning(f"Vacation insert failed: {doctor_name} was deactivated")
                    raise DataNotFoundException(f"Doctor {doctor_name} not found")
                if self.vacations.exists_overlap(start_date, end_date, doctor_id=scope_id):
                    raise ConcurrencyException(f"Vacation from {start_date} to {end_date} is already planned")
                saved = self.vacations.save(VacationDto(
                    id=None,
                    doctor_id=doctor.id,
                    start_date=start_date,
                    end_date=end_date,
                    type=vacation_type,
                    status=VacationStatus.PLANNED,
                ))
                self.uow.commit()
        logger.info(f"{vacation_type.value} for {doctor_name} planned from {start_date} to {end_date}")
        return saved.id

    def cancel_vacation(self, doctor_name: str, start_date: date) -> int:
        doctor = self._doctor(doctor_name)
        if start_date < self.clock.current_date():
            raise ConcurrencyException("Can't cancel vacations from the past")

        with self.uow:
            vacation = self.vacations.find_by_doctor_and_start_date(doctor.id, start_date)
            if not vacation:
                logger.warning(f"Cancel failed: no vacation for {doctor_name} starting {start_date}")
                raise DataNotFoundException(f"No vacation for {doctor_name} starting {start_date}")
            transition(vacation, VacationStatus.CANCELED)
            self.vacations.save(vacation)
            self.uow.commit()
        logger.info(f"Vacation {vacation.id} of {doctor_name} canceled")
        return vacation.id

    def advance_statuses(self, today: date) -> int:
        """Move vacations along PLANNED -> IN_PROGRESS -> DONE according to ``today``."""
        with self.uow:
            open_vacations = self.vacations.find_all_by_status([VacationStatus.PLANNED, VacationStatus.IN_PROGRESS])
            changed = []
            for v in open_vacations:
                before = v.status
                if v.status == VacationStatus.PLANNED and v.start_date <= today:
                    transition(v, VacationStatus.IN_PROGRESS)
                if v.status == VacationStatus.IN_PROGRESS and v.end_date < today:
                    transition(v, VacationStatus.DONE)
                if v.status != before:
                    changed.append(v)
            self.vacations.save_all(changed)
            self.uow.commit()
        if changed:
            logger.info(f"Vacation statuses advanced for {len(changed)} vacation(s) as of {today}")
        return len(changed)

    def list_by_doctor_and_dates(self, doctor_name: str, start_date: Optional[date] = None, end_date: Optional[date] = None) -> List[VacationDto]:
        doctor = self._doctor(doctor_name)
        return self.vacations.find_all_by_doctor_within(doctor.id, start_date, end_date)

    def list_by_type(self, vacation_type: VacationType, doctor_name: Optional[str] = None) -> List[VacationDto]:
        doctor_id = self._doctor(doctor_name).id if doctor_name else None
        return self.vacations.find_all_by_type(vacation_type, doctor_id=doctor_id)

    def list_by_status(self, doctor_name: str, status: VacationStatus) -> List[VacationDto]:
        doctor = self._doctor(doctor_name)
        return self.vacations.find_all_by_status([status], doctor_id=doctor.id)

    def is_on_vacation(self, doctor_name: str, day: date) -> bool:
        doctor = self._doctor(doctor_name)
        return any(v.covers(day) for v in self.vacations.find_all_by_doctor(doctor.id))
