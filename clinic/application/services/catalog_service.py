import logging
from dataclasses import dataclass
from datetime import date, time
from typing import Dict, List, Optional

from ...exceptions import DataMismatchException, DataNotFoundException
from ..ports.doctor_repo import DoctorDto, DoctorRepository
from ..ports.holiday_repo import HolidayDto, HolidayRepository
from ..ports.investigation_repo import InvestigationDto, InvestigationRepository
from ..ports.specialty_repo import SpecialtyDto, SpecialtyRepository
from ..ports.unit_of_work import UnitOfWork
from ..ports.working_hours_repo import WorkingHoursDto, WorkingHoursRepository
from .booking_service import calculate_price

logger = logging.getLogger(__name__)


@dataclass
class CatalogService:
    specialties: SpecialtyRepository
    doctors: DoctorRepository
    investigations: InvestigationRepository
    working_hours: WorkingHoursRepository
    holidays: HolidayRepository
    uow: UnitOfWork

    # Specialties

    def upsert_specialty(self, name: str, specialty_id: Optional[int] = None) -> SpecialtyDto:
        if specialty_id is not None and not self.specialties.find_active_by_id(specialty_id):
            raise DataNotFoundException(f"Specialty #{specialty_id} not found")
        with self.uow:
            saved = self.specialties.save(SpecialtyDto(id=specialty_id, name=name))
            self.uow.commit()
        logger.info(f"Specialty {saved.name} saved with id {saved.id}")
        return saved

    def list_specialties(self) -> List[SpecialtyDto]:
        return self.specialties.list_active()

    def get_specialty(self, specialty_id: int) -> SpecialtyDto:
        specialty = self.specialties.find_active_by_id(specialty_id)
        if not specialty:
            raise DataNotFoundException("Wrong ID")
        return specialty

    def get_specialty_by_name(self, name: str) -> SpecialtyDto:
        specialty = self.specialties.find_active_by_name(name)
        if not specialty:
            raise DataNotFoundException(f"Specialty {name} not found")
        return specialty

    # Doctors

    def upsert_doctor(self, name: str, specialty_name: str, price_rate: float, doctor_id: Optional[int] = None) -> DoctorDto:
        specialty = self.get_specialty_by_name(specialty_name)
        if doctor_id is not None and not self.doctors.find_active_by_id(doctor_id):
            raise DataNotFoundException(f"Doctor #{doctor_id} not found")
        with self.uow:
            saved = self.doctors.save(DoctorDto(
                id=doctor_id,
                name=name,
                specialty_id=specialty.id,
                price_rate=price_rate,
                specialty_name=specialty.name,
            ))
            self.uow.commit()
        logger.info(f"Doctor {saved.name} saved with id {saved.id}")
        return saved

    def get_doctor(self, doctor_id: int) -> DoctorDto:
        doctor = self.doctors.find_active_by_id(doctor_id)
        if not doctor:
            raise DataNotFoundException("Wrong ID")
        return doctor

    def get_doctor_by_name(self, name: str) -> DoctorDto:
        doctor = self.doctors.find_active_by_name(name)
        if not doctor:
            raise DataNotFoundException(f"Doctor {name} not found")
        return doctor

    def list_doctors(self) -> List[DoctorDto]:
        return self.doctors.list_active()

    def list_doctors_by_specialty(self, specialty_name: str) -> List[DoctorDto]:
        return self.doctors.find_active_by_specialty(self.get_specialty_by_name(specialty_name).id)

    # Investigations

    def upsert_investigation(self, name: str, specialty_name: str, base_price: float, duration: int,
                             investigation_id: Optional[int] = None) -> InvestigationDto:
        if duration <= 0:
            raise DataMismatchException(f"Investigation duration must be positive, got {duration}")
        specialty = self.get_specialty_by_name(specialty_name)
        if investigation_id is not None and not self.investigations.find_active_by_id(investigation_id):
            raise DataNotFoundException(f"Investigation #{investigation_id} not found")
        with self.uow:
            saved = self.investigations.save(InvestigationDto(
                id=investigation_id,
                name=name,
                specialty_id=specialty.id,
                base_price=base_price,
                duration=duration,
                specialty_name=specialty.name,
            ))
            self.uow.commit()
        logger.info(f"Investigation {saved.name} saved with id {saved.id}")
        return saved

    def list_investigations(self) -> List[InvestigationDto]:
        return self.investigations.list_active()

    def get_investigation(self, investigation_id: int) -> InvestigationDto:
        investigation = self.investigations.find_active_by_id(investigation_id)
        if not investigation:
            raise DataNotFoundException("Wrong ID")
        return investigation

    def get_investigation_by_name(self, name: str) -> InvestigationDto:
        investigation = self.investigations.find_active_by_name(name)
        if not investigation:
            raise DataNotFoundException(f"Investigation {name} not found")
        return investigation

    def list_investigations_by_specialty(self, specialty_name: str) -> List[InvestigationDto]:
        return self.investigations.find_active_by_specialty(self.get_specialty_by_name(specialty_name).id)

    def list_investigations_by_duration(self, duration: int) -> List[InvestigationDto]:
        return self.investigations.find_active_by_duration(duration)

    def delete_investigation(self, investigation_id: int) -> str:
        investigation = self.investigations.find_active_by_id(investigation_id)
        if not investigation:
            logger.warning(f"Delete failed: investigation #{investigation_id} not found")
            raise DataNotFoundException("Wrong ID")
        return self._deactivate_investigation(investigation)

    def delete_investigation_by_name(self, name: str) -> str:
        investigation = self.investigations.find_active_by_name(name)
        if not investigation:
            logger.warning(f"Delete failed: investigation {name} not found")
            raise DataNotFoundException(f"Investigation {name} not found")
        return self._deactivate_investigation(investigation)

    def _deactivate_investigation(self, investigation: InvestigationDto) -> str:
        with self.uow:
            investigation.is_active = False
            self.investigations.save(investigation)
            self.uow.commit()
        logger.info(f"Investigation {investigation.name} deleted")
        return f"Investigation {investigation.name} deleted"

    def get_investigation_pricing(self, doctor_name: str, investigation_name: Optional[str] = None) -> Dict[str, Dict[str, float]]:
        """Price of one investigation, or of every investigation the doctor's specialty offers."""
        doctor = self.get_doctor_by_name(doctor_name)
        if investigation_name:
            investigation = self.investigations.find_active_by_name(investigation_name)
            if not investigation:
                raise DataNotFoundException(f"Investigation {investigation_name} not found")
            offered = [investigation]
        else:
            offered = self.investigations.find_active_by_specialty(doctor.specialty_id)
        return {
            doctor.name: {
                inv.name: calculate_price(inv.base_price, doctor.price_rate)
                for inv in offered
            }
        }

    # Working hours

    def upsert_working_hours(self, doctor_name: str, day_of_week: int, start_time: time, end_time: time) -> WorkingHoursDto:
        if not 1 <= day_of_week <= 7:
            raise DataMismatchException(f"Day of week must be between 1 and 7, got {day_of_week}")
        if start_time >= end_time:
            raise DataMismatchException("Working hours must start before they end")
        doctor = self.get_doctor_by_name(doctor_name)
        with self.uow:
            existing = self.working_hours.find_by_doctor_and_day(doctor.id, day_of_week)
            saved = self.working_hours.save(WorkingHoursDto(
                id=existing.id if existing else None,
                doctor_id=doctor.id,
                day_of_week=day_of_week,
                start_time=start_time,
                end_time=end_time,
                doctor_name=doctor.name,
            ))
            self.uow.commit()
        logger.info(f"Working hours for {doctor.name} on day {day_of_week} set to {start_time}-{end_time}")
        return saved

    def list_working_hours(self, doctor_name: Optional[str] = None, day_of_week: Optional[int] = None) -> List[WorkingHoursDto]:
        doctor_id = self.get_doctor_by_name(doctor_name).id if doctor_name else None
        return self.working_hours.find_all(doctor_id=doctor_id, day_of_week=day_of_week)

    def delete_working_hours(self, doctor_name: str, day_of_week: int) -> str:
        doctor = self.get_doctor_by_name(doctor_name)
        with self.uow:
            removed = self.working_hours.delete_for_doctor_and_day(doctor.id, day_of_week)
            if not removed:
                logger.warning(f"Delete failed: no working hours for {doctor_name} on day {day_of_week}")
                raise DataNotFoundException(f"No working hours for {doctor_name} on day {day_of_week}")
            self.uow.commit()
        logger.info(f"Working hours for {doctor_name} on day {day_of_week} deleted")
        return f"Working hours for {doctor_name} deleted"

    # Holidays

    def upsert_holiday(self, start_date: date, end_date: date, description: str, holiday_id: Optional[int] = None) -> HolidayDto:
        if end_date < start_date:
            raise DataMismatchException(f"Holiday end {end_date} is before its start {start_date}")
        if holiday_id is not None and not self.holidays.find_active_by_id(holiday_id):
            raise DataNotFoundException(f"Holiday #{holiday_id} not found")
        with self.uow:
            saved = self.holidays.save(HolidayDto(
                id=holiday_id,
                start_date=start_date,
                end_date=end_date,
                description=description,
            ))
            self.uow.commit()
        logger.info(f"Holiday {saved.description} saved with id {saved.id}")
        return saved

    def list_holidays(self) -> List[HolidayDto]:
        return self.holidays.list_active()

    def is_holiday(self, day: date) -> bool:
        return self.holidays.is_holiday(day)

    def get_holiday(self, holiday_id: int) -> HolidayDto:
        holiday = self.holidays.find_active_by_id(holiday_id)
        if not holiday:
            raise DataNotFoundException("Wrong ID")
        return holiday

    def get_holiday_by_description(self, description: str) -> HolidayDto:
        holiday = self.holidays.find_active_by_description(description)
        if not holiday:
            raise DataNotFoundException(f"Holiday {description} not found")
        return holiday

    def delete_holiday(self, holiday_id: int) -> str:
        holiday = self.holidays.find_active_by_id(holiday_id)
        if not holiday:
            logger.warning(f"Delete failed: holiday #{holiday_id} not found")
            raise DataNotFoundException("Wrong ID")
        return self._deactivate_holiday(holiday)

    def delete_holiday_by_description(self, description: str) -> str:
        holiday = self.holidays.find_active_by_description(description)
        if not holiday:
            logger.warning(f"Delete failed: holiday {description} not found")
            raise DataNotFoundException(f"Holiday {description} not found")
        return self._deactivate_holiday(holiday)

    def _deactivate_holiday(self, holiday: HolidayDto) -> str:
        with self.uow:
            holiday.is_active = False
            self.holidays.save(holiday)
            self.uow.commit()
        logger.info(f"Holiday {holiday.description} deleted")
        return f"Holiday {holiday.description} deleted"
