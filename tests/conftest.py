import itertools
from contextlib import contextmanager
from dataclasses import replace
from datetime import date, time
from types import SimpleNamespace

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from clinic.database import create_db_and_tables
from clinic.db.models.enums import AppointmentStatus, VacationStatus
from clinic.application.ports.doctor_repo import DoctorDto
from clinic.application.ports.investigation_repo import InvestigationDto
from clinic.application.ports.specialty_repo import SpecialtyDto
from clinic.application.ports.working_hours_repo import WorkingHoursDto
from clinic.application.services.availability_service import AvailabilityService
from clinic.application.services.booking_service import BookingService
from clinic.application.services.cascade_service import CascadeService
from clinic.application.services.catalog_service import CatalogService
from clinic.application.services.vacation_service import VacationService

# Monday
TODAY = date(2024, 1, 1)


class FakeClock:
    def __init__(self, today: date):
        self.today = today

    def current_date(self) -> date:
        return self.today


class FakeUnitOfWork:
    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self.rollback()
        return False

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


class FakeLocks:
    def __init__(self):
        self.held = []

    @contextmanager
    def hold(self, key):
        self.held.append(key)
        yield


class FakeRepo:
    """Keeps copies of the DTOs it is given, the way a database would."""

    def __init__(self):
        self.rows = {}
        self._ids = itertools.count(1)

    def _store(self, dto):
        if dto.id is None:
            dto = replace(dto, id=next(self._ids))
        self.rows[dto.id] = replace(dto)
        return replace(dto)

    def _all(self):
        return [replace(r) for r in self.rows.values()]

    def save(self, dto):
        return self._store(dto)

    def save_all(self, dtos):
        for dto in dtos:
            self._store(dto)


class FakeSpecialtyRepo(FakeRepo):
    def find_active_by_name(self, name):
        return next((s for s in self._all() if s.name == name and s.is_active), None)

    def find_active_by_id(self, specialty_id):
        return next((s for s in self._all() if s.id == specialty_id and s.is_active), None)

    def list_active(self):
        return [s for s in self._all() if s.is_active]


class FakeDoctorRepo(FakeRepo):
    def __init__(self):
        super().__init__()
        self.locked = []

    def find_active_by_name(self, name):
        return next((d for d in self._all() if d.name == name and d.is_active), None)

    def find_active_by_id(self, doctor_id):
        return next((d for d in self._all() if d.id == doctor_id and d.is_active), None)

    def find_active_by_specialty(self, specialty_id):
        return [d for d in self._all() if d.specialty_id == specialty_id and d.is_active]

    def list_active(self):
        return [d for d in self._all() if d.is_active]

    def lock(self, doctor_id):
        self.locked.append(doctor_id)
        return self.find_active_by_id(doctor_id)


class FakeInvestigationRepo(FakeRepo):
    def find_active_by_name(self, name):
        return next((i for i in self._all() if i.name == name and i.is_active), None)

    def find_active_by_id(self, investigation_id):
        return next((i for i in self._all() if i.id == investigation_id and i.is_active), None)

    def find_active_by_specialty(self, specialty_id):
        return [i for i in self._all() if i.specialty_id == specialty_id and i.is_active]

    def find_active_by_duration(self, duration):
        return [i for i in self._all() if i.duration == duration and i.is_active]

    def list_active(self):
        return [i for i in self._all() if i.is_active]


class FakeWorkingHoursRepo(FakeRepo):
    def find_by_doctor_and_day(self, doctor_id, day_of_week):
        return next((w for w in self._all() if w.doctor_id == doctor_id and w.day_of_week == day_of_week), None)

    def find_all(self, doctor_id=None, day_of_week=None):
        return [
            w for w in self._all()
            if (doctor_id is None or w.doctor_id == doctor_id)
            and (day_of_week is None or w.day_of_week == day_of_week)
        ]

    def _delete(self, rows):
        for w in rows:
            del self.rows[w.id]
        return len(rows)

    def delete_for_doctor_and_day(self, doctor_id, day_of_week):
        return self._delete(self.find_all(doctor_id, day_of_week))

    def delete_all_for_doctor(self, doctor_id):
        return self._delete(self.find_all(doctor_id))


class FakeHolidayRepo(FakeRepo):
    def is_holiday(self, day):
        return any(h.is_active and h.start_date <= day <= h.end_date for h in self._all())

    def find_active_by_id(self, holiday_id):
        return next((h for h in self._all() if h.id == holiday_id and h.is_active), None)

    def find_active_by_description(self, description):
        return next((h for h in self._all() if h.description == description and h.is_active), None)

    def list_active(self):
        return [h for h in self._all() if h.is_active]


class FakeVacationRepo(FakeRepo):
    def exists_overlap(self, start_date, end_date, doctor_id=None):
        return any(
            v.status != VacationStatus.CANCELED
            and v.start_date <= end_date and v.end_date >= start_date
            and (doctor_id is None or v.doctor_id == doctor_id)
            for v in self._all()
        )

    def find_by_doctor_and_start_date(self, doctor_id, start_date):
        return next(
            (v for v in self._all()
             if v.doctor_id == doctor_id and v.start_date == start_date and v.status != VacationStatus.CANCELED),
            None,
        )

    def find_all_by_doctor(self, doctor_id):
        return [v for v in self._all() if v.doctor_id == doctor_id]

    def find_all_by_status(self, statuses, doctor_id=None):
        statuses = list(statuses)
        return [v for v in self._all() if v.status in statuses and (doctor_id is None or v.doctor_id == doctor_id)]

    def find_all_by_type(self, vacation_type, doctor_id=None):
        return [v for v in self._all() if v.type == vacation_type and (doctor_id is None or v.doctor_id == doctor_id)]

    def find_all_by_doctor_within(self, doctor_id, start_date, end_date):
        return [
            v for v in self.find_all_by_doctor(doctor_id)
            if (start_date is None or v.start_date >= start_date)
            and (end_date is None or v.end_date <= end_date)
        ]


class FakeAppointmentRepo(FakeRepo):
    def find_by_doctor_and_date(self, doctor_id, appointment_date, status=None):
        return [
            a for a in self._all()
            if a.doctor_id == doctor_id and a.appointment_date == appointment_date
            and (status is None or a.status == status)
        ]

    def exists_overlap(self, doctor_id, appointment_date, start_time, end_time):
        return any(
            a.start_time < end_time and a.end_time > start_time
            for a in self.find_by_doctor_and_date(doctor_id, appointment_date, AppointmentStatus.NEW)
        )

    def find_by_id_and_client_and_status(self, appointment_id, client_name, status):
        return next(
            (a for a in self._all() if a.id == appointment_id and a.client_name == client_name and a.status == status),
            None,
        )

    def find_all_by_doctor(self, doctor_id):
        return [a for a in self._all() if a.doctor_id == doctor_id]

    def get_by_id(self, appointment_id):
        return next((a for a in self._all() if a.id == appointment_id), None)


@pytest.fixture
def clinic():
    """Fake-backed services over one seeded doctor who works Mondays 08:00-12:00."""
    w = SimpleNamespace(
        specialties=FakeSpecialtyRepo(),
        doctors=FakeDoctorRepo(),
        investigations=FakeInvestigationRepo(),
        working_hours=FakeWorkingHoursRepo(),
        holidays=FakeHolidayRepo(),
        vacations=FakeVacationRepo(),
        appointments=FakeAppointmentRepo(),
        uow=FakeUnitOfWork(),
        clock=FakeClock(TODAY),
        locks=FakeLocks(),
    )
    w.specialty = w.specialties.save(SpecialtyDto(id=None, name="Cardiology"))
    w.doctor = w.doctors.save(DoctorDto(id=None, name="Dr. House", specialty_id=w.specialty.id, price_rate=10.0))
    w.ecg = w.investigations.save(InvestigationDto(id=None, name="ECG", specialty_id=w.specialty.id, base_price=100.0, duration=30))
    w.working_hours.save(WorkingHoursDto(id=None, doctor_id=w.doctor.id, day_of_week=1, start_time=time(8, 0), end_time=time(12, 0)))

    w.availability = AvailabilityService(
        doctors=w.doctors,
        investigations=w.investigations,
        working_hours=w.working_hours,
        holidays=w.holidays,
        vacations=w.vacations,
        appointments=w.appointments,
        clock=w.clock,
    )
    w.booking = BookingService(
        doctors=w.doctors,
        investigations=w.investigations,
        appointments=w.appointments,
        uow=w.uow,
        clock=w.clock,
        locks=w.locks,
    )
    w.vacation_service = VacationService(doctors=w.doctors, vacations=w.vacations, uow=w.uow, clock=w.clock, locks=w.locks)
    w.cascade = CascadeService(
        doctors=w.doctors,
        specialties=w.specialties,
        investigations=w.investigations,
        vacations=w.vacations,
        working_hours=w.working_hours,
        booking=w.booking,
        uow=w.uow,
    )
    w.catalog = CatalogService(
        specialties=w.specialties,
        doctors=w.doctors,
        investigations=w.investigations,
        working_hours=w.working_hours,
        holidays=w.holidays,
        uow=w.uow,
    )
    return w


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session
