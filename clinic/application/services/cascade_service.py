import logging
from contextlib import ExitStack
from dataclasses import dataclass
from typing import Optional

from ...db.models.enums import VacationStatus
from ...exceptions import DataNotFoundException
from ..ports.doctor_repo import DoctorDto, DoctorRepository
from ..ports.investigation_repo import InvestigationRepository
from ..ports.specialty_repo import SpecialtyDto, SpecialtyRepository
from ..ports.unit_of_work import UnitOfWork
from ..ports.vacation_repo import VacationRepository
from ..ports.working_hours_repo import WorkingHoursRepository
from .booking_service import BookingService

logger = logging.getLogger(__name__)


@dataclass
class CascadeService:
    """Soft-deletes doctors and specialties together with everything that hangs off them.

    Each public operation runs in a single unit of work: either the whole
    cascade is committed or none of it is.
    """

    doctors: DoctorRepository
    specialties: SpecialtyRepository
    investigations: InvestigationRepository
    vacations: VacationRepository
    working_hours: WorkingHoursRepository
    booking: BookingService
    uow: UnitOfWork

    def deactivate_doctor(self, doctor_name: str) -> str:
        return self._deactivate_doctor(self.doctors.find_active_by_name(doctor_name), doctor_name)

    def deactivate_doctor_by_id(self, doctor_id: int) -> str:
        return self._deactivate_doctor(self.doctors.find_active_by_id(doctor_id), f"#{doctor_id}")

    def deactivate_specialty(self, specialty_name: str) -> str:
        return self._deactivate_specialty(self.specialties.find_active_by_name(specialty_name), specialty_name)

    def deactivate_specialty_by_id(self, specialty_id: int) -> str:
        return self._deactivate_specialty(self.specialties.find_active_by_id(specialty_id), f"#{specialty_id}")

    def _deactivate_doctor(self, doctor: Optional[DoctorDto], label: str) -> str:
        if not doctor:
            logger.warning(f"Delete failed: doctor {label} not found")
            raise DataNotFoundException(f"Doctor {label} not found")
        with self.booking.locks.hold(doctor.id):
            with self.uow:
                doctor = self.doctors.lock(doctor.id)
                if not doctor:
                    logger.warning(f"Delete failed: doctor {label} already deleted")
                    raise DataNotFoundException(f"Doctor {label} not found")
                self._cascade_doctor(doctor)
                self.doctors.save(doctor)
                self.uow.commit()
        logger.info(f"Doctor {doctor.name} deleted")
        return f"Doctor {doctor.name} deleted"

    def _deactivate_specialty(self, specialty: Optional[SpecialtyDto], label: str) -> str:
        if not specialty:
            logger.warning(f"Delete failed: specialty {label} not found")
            raise DataNotFoundException(f"Specialty {label} not found")
        # Locks are always taken in ascending doctor id order
        doctor_ids = sorted(d.id for d in self.doctors.find_active_by_specialty(specialty.id))
        with ExitStack() as held:
            for doctor_id in doctor_ids:
                held.enter_context(self.booking.locks.hold(doctor_id))
            with self.uow:
                specialty.is_active = False
                self.specialties.save(specialty)

                doctors = [d for d in map(self.doctors.lock, doctor_ids) if d]
                for doctor in doctors:
                    self._cascade_doctor(doctor)
                self.doctors.save_all(doctors)

                investigations = self.investigations.find_active_by_specialty(specialty.id)
                for investigation in investigations:
                    investigation.is_active = False
                self.investigations.save_all(investigations)

                self.uow.commit()
        logger.info(
            f"Specialty {specialty.name} deleted with {len(doctors)} doctor(s) "
            f"and {len(investigations)} investigation(s)"
        )
        return f"Specialty {specialty.name} deleted"

    def _cascade_doctor(self, doctor: DoctorDto) -> None:
        # Leaves persisting the doctor row itself to the caller
        doctor.is_active = False

        vacations = [v for v in self.vacations.find_all_by_doctor(doctor.id) if not v.status.is_terminal]
        for vacation in vacations:
            vacation.status = VacationStatus.CANCELED
        self.vacations.save_all(vacations)

        removed = self.working_hours.delete_all_for_doctor(doctor.id)
        logger.info(f"Working hours for {doctor.name} deleted ({removed})")

        logger.info(self.booking.cancel_all_appointments_for_doctor(doctor))
