from fastapi import Depends
from sqlmodel import Session

from .config import settings
from .database import get_session
from .application.ports.clock import Clock
from .application.services.availability_service import AvailabilityService
from .application.services.booking_service import BookingService
from .application.services.cascade_service import CascadeService
from .application.services.catalog_service import CatalogService
from .application.services.slot_calculator import SlotPolicy
from .application.services.vacation_service import VacationService, VacationOverlapScope
from .infrastructure.clock.operational_clock import OperationalClock
from .infrastructure.locking.keyed_locks import KeyedLocks
from .infrastructure.persistence.sqlalchemy.unit_of_work_sql import SqlUnitOfWork
from .infrastructure.persistence.sqlalchemy.repositories.appointments_repository_sql import SqlAppointmentRepository
from .infrastructure.persistence.sqlalchemy.repositories.doctor_repository_sql import SqlDoctorRepository
from .infrastructure.persistence.sqlalchemy.repositories.holiday_repository_sql import SqlHolidayRepository
from .infrastructure.persistence.sqlalchemy.repositories.investigation_repository_sql import SqlInvestigationRepository
from .infrastructure.persistence.sqlalchemy.repositories.specialty_repository_sql import SqlSpecialtyRepository
from .infrastructure.persistence.sqlalchemy.repositories.vacation_repository_sql import SqlVacationRepository
from .infrastructure.persistence.sqlalchemy.repositories.working_hours_repository_sql import SqlWorkingHoursRepository

# Process-wide state shared by every request
operational_clock = OperationalClock(settings.OPERATIONAL_START_DATE)
doctor_locks = KeyedLocks()


def get_clock() -> OperationalClock:
    return operational_clock


def get_availability_service(session: Session = Depends(get_session), clock: Clock = Depends(get_clock)) -> AvailabilityService:
    return AvailabilityService(
        doctors=SqlDoctorRepository(session),
        investigations=SqlInvestigationRepository(session),
        working_hours=SqlWorkingHoursRepository(session),
        holidays=SqlHolidayRepository(session),
        vacations=SqlVacationRepository(session),
        appointments=SqlAppointmentRepository(session),
        clock=clock,
        slot_step=settings.SLOT_STEP_MINUTES,
        policy=SlotPolicy(settings.SLOT_OVERLAP_POLICY.lower()),
    )


def get_booking_service(session: Session = Depends(get_session), clock: Clock = Depends(get_clock)) -> BookingService:
    return BookingService(
        doctors=SqlDoctorRepository(session),
        investigations=SqlInvestigationRepository(session),
        appointments=SqlAppointmentRepository(session),
        uow=SqlUnitOfWork(session),
        clock=clock,
        locks=doctor_locks,
    )


def get_vacation_service(session: Session = Depends(get_session), clock: Clock = Depends(get_clock)) -> VacationService:
    return VacationService(
        doctors=SqlDoctorRepository(session),
        vacations=SqlVacationRepository(session),
        uow=SqlUnitOfWork(session),
        clock=clock,
        locks=doctor_locks,
        overlap_scope=VacationOverlapScope(settings.VACATION_OVERLAP_SCOPE.lower()),
    )


def get_cascade_service(
    session: Session = Depends(get_session),
    booking: BookingService = Depends(get_booking_service),
) -> CascadeService:
    return CascadeService(
        doctors=SqlDoctorRepository(session),
        specialties=SqlSpecialtyRepository(session),
        investigations=SqlInvestigationRepository(session),
        vacations=SqlVacationRepository(session),
        working_hours=SqlWorkingHoursRepository(session),
        booking=booking,
        uow=SqlUnitOfWork(session),
    )


def get_catalog_service(session: Session = Depends(get_session)) -> CatalogService:
    return CatalogService(
        specialties=SqlSpecialtyRepository(session),
        doctors=SqlDoctorRepository(session),
        investigations=SqlInvestigationRepository(session),
        working_hours=SqlWorkingHoursRepository(session),
        holidays=SqlHolidayRepository(session),
        uow=SqlUnitOfWork(session),
    )
