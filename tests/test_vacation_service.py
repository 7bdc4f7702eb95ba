from datetime import date

import pytest

from clinic.application.ports.doctor_repo import DoctorDto
from clinic.application.ports.vacation_repo import VacationDto
from clinic.application.services.vacation_service import CLINIC_VACATIONS_KEY, VacationOverlapScope
from clinic.db.models.enums import VacationStatus, VacationType
from clinic.exceptions import ConcurrencyException, DataMismatchException, DataNotFoundException


def insert(clinic, start, end, doctor="Dr. House"):
    return clinic.vacation_service.insert_vacation(doctor, start, end, VacationType.VACATION)


def test_status_transitions():
    assert VacationStatus.PLANNED.can_transition_to(VacationStatus.IN_PROGRESS)
    assert VacationStatus.IN_PROGRESS.can_transition_to(VacationStatus.DONE)
    assert VacationStatus.PLANNED.can_transition_to(VacationStatus.CANCELED)
    assert not VacationStatus.PLANNED.can_transition_to(VacationStatus.DONE)
    assert not VacationStatus.DONE.can_transition_to(VacationStatus.CANCELED)
    assert not VacationStatus.CANCELED.can_transition_to(VacationStatus.PLANNED)
    assert VacationStatus.DONE.is_terminal and VacationStatus.CANCELED.is_terminal


def test_insert_planned(clinic):
    vacation_id = insert(clinic, date(2024, 2, 1), date(2024, 2, 10))
    assert clinic.vacations.rows[vacation_id].status == VacationStatus.PLANNED
    assert clinic.uow.commits == 1


def test_insert_unknown_doctor_first(clinic):
    with pytest.raises(DataNotFoundException):
        insert(clinic, date(2020, 1, 1), date(2020, 1, 2), doctor="Nobody")


def test_insert_in_past(clinic):
    with pytest.raises(ConcurrencyException):
        insert(clinic, date(2023, 12, 1), date(2024, 1, 5))


def test_insert_reversed_range(clinic):
    with pytest.raises(DataMismatchException):
        insert(clinic, date(2024, 2, 10), date(2024, 2, 1))


def test_insert_overlap_same_doctor(clinic):
    insert(clinic, date(2024, 2, 1), date(2024, 2, 10))
    with pytest.raises(ConcurrencyException, match="already planned"):
        insert(clinic, date(2024, 2, 10), date(2024, 2, 15))


def test_canceled_vacation_does_not_block(clinic):
    insert(clinic, date(2024, 2, 1), date(2024, 2, 10))
    clinic.vacation_service.cancel_vacation("Dr. House", date(2024, 2, 1))
    assert insert(clinic, date(2024, 2, 5), date(2024, 2, 8))


def test_overlap_scope(clinic):
    clinic.doctors.save(DoctorDto(id=None, name="Dr. Wilson", specialty_id=clinic.specialty.id, price_rate=0.0))
    insert(clinic, date(2024, 2, 1), date(2024, 2, 10))
    assert insert(clinic, date(2024, 2, 5), date(2024, 2, 8), doctor="Dr. Wilson")

    clinic.vacation_service.overlap_scope = VacationOverlapScope.CLINIC
    with pytest.raises(ConcurrencyException):
        insert(clinic, date(2024, 2, 9), date(2024, 2, 12), doctor="Dr. Wilson")


def test_cancel_vacation(clinic):
    vacation_id = insert(clinic, date(2024, 2, 1), date(2024, 2, 10))
    assert clinic.vacation_service.cancel_vacation("Dr. House", date(2024, 2, 1)) == vacation_id
    assert clinic.vacations.rows[vacation_id].status == VacationStatus.CANCELED


def test_cancel_vacation_errors(clinic):
    with pytest.raises(DataNotFoundException):
        clinic.vacation_service.cancel_vacation("Nobody", date(2024, 2, 1))
    with pytest.raises(ConcurrencyException, match="from the past"):
        clinic.vacation_service.cancel_vacation("Dr. House", date(2023, 12, 1))
    with pytest.raises(DataNotFoundException):
        clinic.vacation_service.cancel_vacation("Dr. House", date(2024, 2, 1))


def test_cancel_done_vacation_rejected(clinic):
    clinic.vacations.save(VacationDto(
        id=None, doctor_id=clinic.doctor.id, start_date=date(2024, 1, 1), end_date=date(2024, 1, 3),
        type=VacationType.SICK_LEAVE, status=VacationStatus.DONE,
    ))
    with pytest.raises(ConcurrencyException):
        clinic.vacation_service.cancel_vacation("Dr. House", date(2024, 1, 1))


def test_advance_statuses(clinic):
    started = insert(clinic, date(2024, 1, 2), date(2024, 1, 20))
    later = insert(clinic, date(2024, 3, 1), date(2024, 3, 5))
    short = insert(clinic, date(2024, 2, 1), date(2024, 2, 2))

    assert clinic.vacation_service.advance_statuses(date(2024, 1, 2)) == 1
    assert clinic.vacations.rows[started].status == VacationStatus.IN_PROGRESS

    assert clinic.vacation_service.advance_statuses(date(2024, 2, 10)) == 2
    assert clinic.vacations.rows[started].status == VacationStatus.DONE
    assert clinic.vacations.rows[short].status == VacationStatus.DONE
    assert clinic.vacations.rows[later].status == VacationStatus.PLANNED


def test_queries(clinic):
    insert(clinic, date(2024, 2, 1), date(2024, 2, 10))
    insert(clinic, date(2024, 3, 1), date(2024, 3, 10))
    assert len(clinic.vacation_service.list_by_doctor_and_dates("Dr. House", date(2024, 2, 1), date(2024, 2, 28))) == 1
    assert len(clinic.vacation_service.list_by_doctor_and_dates("Dr. House")) == 2
    assert len(clinic.vacation_service.list_by_type(VacationType.VACATION)) == 2
    assert clinic.vacation_service.list_by_type(VacationType.SICK_LEAVE, "Dr. House") == []
    assert len(clinic.vacation_service.list_by_status("Dr. House", VacationStatus.PLANNED)) == 2


def test_is_on_vacation_uses_strict_containment(clinic):
    insert(clinic, date(2024, 2, 1), date(2024, 2, 10))
    assert clinic.vacation_service.is_on_vacation("Dr. House", date(2024, 2, 5))
    assert not clinic.vacation_service.is_on_vacation("Dr. House", date(2024, 2, 1))
    assert not clinic.vacation_service.is_on_vacation("Dr. House", date(2024, 2, 10))


def test_insert_holds_doctor_lock(clinic):
    insert(clinic, date(2024, 2, 1), date(2024, 2, 10))
    assert clinic.locks.held == [clinic.doctor.id]
    assert clinic.doctors.locked == [clinic.doctor.id]


def test_clinic_scope_insert_holds_clinic_wide_lock(clinic):
    clinic.vacation_service.overlap_scope = VacationOverlapScope.CLINIC
    insert(clinic, date(2024, 2, 1), date(2024, 2, 10))
    assert clinic.locks.held == [CLINIC_VACATIONS_KEY, clinic.doctor.id]


def test_insert_for_doctor_deactivated_before_lock(clinic, monkeypatch):
    lock = clinic.doctors.lock

    def deactivate_then_lock(doctor_id):
        monkeypatch.setattr(clinic.doctors, "lock", lock)
        clinic.cascade.deactivate_doctor("Dr. House")
        return lock(doctor_id)

    monkeypatch.setattr(clinic.doctors, "lock", deactivate_then_lock)
    with pytest.raises(DataNotFoundException):
        insert(clinic, date(2024, 2, 1), date(2024, 2, 10))
    assert clinic.vacations.rows == {}
