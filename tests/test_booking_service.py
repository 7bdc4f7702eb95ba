from datetime import date, time

import pytest

from clinic.application.ports.investigation_repo import InvestigationDto
from clinic.application.services.booking_service import calculate_price
from clinic.db.models.enums import AppointmentStatus
from clinic.exceptions import ConcurrencyException, DataMismatchException, DataNotFoundException

NEXT_MONDAY = date(2024, 1, 8)


def book(clinic, start=time(8, 0), client="Ann", investigation="ECG", day=NEXT_MONDAY):
    return clinic.booking.book_appointment("Dr. House", investigation, client, day, start)


def test_price_is_base_plus_rate_percentage():
    assert calculate_price(100.0, 10.0) == pytest.approx(110.0)
    assert calculate_price(80.0, 0.0) == 80.0


def test_book_success(clinic):
    appointment_id = book(clinic)
    appt = clinic.appointments.get_by_id(appointment_id)
    assert appt.status == AppointmentStatus.NEW
    assert appt.end_time == time(8, 30)
    assert appt.price == pytest.approx(110.0)
    assert clinic.uow.commits == 1
    assert clinic.locks.held == [clinic.doctor.id]
    assert clinic.doctors.locked == [clinic.doctor.id]


def test_double_booking_rejected(clinic):
    book(clinic)
    with pytest.raises(ConcurrencyException):
        book(clinic, client="Bob")
    assert clinic.uow.rollbacks == 1
    assert len(clinic.appointments.rows) == 1


def test_partial_overlap_rejected(clinic):
    clinic.investigations.save(InvestigationDto(id=None, name="Holter", specialty_id=clinic.specialty.id, base_price=200.0, duration=60))
    book(clinic, investigation="Holter")
    with pytest.raises(ConcurrencyException):
        book(clinic, start=time(8, 30), client="Bob")


def test_adjacent_booking_allowed(clinic):
    book(clinic)
    assert book(clinic, start=time(8, 30), client="Bob") == 2


def test_slot_free_again_after_cancel(clinic):
    first = book(clinic)
    clinic.booking.cancel_appointment_by_id_and_client(first, "Ann")
    assert book(clinic, client="Bob") != first


def test_past_date_beats_unknown_names(clinic):
    with pytest.raises(ConcurrencyException):
        clinic.booking.book_appointment("Nobody", "Nothing", "Ann", date(2023, 12, 31), time(8, 0))


def test_unknown_doctor_and_investigation(clinic):
    with pytest.raises(DataNotFoundException):
        clinic.booking.book_appointment("Nobody", "ECG", "Ann", NEXT_MONDAY, time(8, 0))
    with pytest.raises(DataNotFoundException):
        book(clinic, investigation="MRI")


def test_booking_past_midnight_rejected(clinic):
    with pytest.raises(DataMismatchException):
        book(clinic, start=time(23, 45))


def test_price_frozen_at_booking(clinic):
    appointment_id = book(clinic)
    doctor = clinic.doctors.find_active_by_id(clinic.doctor.id)
    doctor.price_rate = 50.0
    clinic.doctors.save(doctor)
    assert clinic.booking.get_appointment(appointment_id).price == pytest.approx(110.0)


def test_cancel_requires_booking_client(clinic):
    appointment_id = book(clinic)
    with pytest.raises(DataNotFoundException):
        clinic.booking.cancel_appointment_by_id_and_client(appointment_id, "Mallory")
    assert clinic.booking.cancel_appointment_by_id_and_client(appointment_id, "Ann") == "Appointment successfully canceled"
    assert clinic.appointments.get_by_id(appointment_id).status == AppointmentStatus.CANCELED


def test_cancel_twice_not_found(clinic):
    appointment_id = book(clinic)
    clinic.booking.cancel_appointment_by_id_and_client(appointment_id, "Ann")
    with pytest.raises(DataNotFoundException):
        clinic.booking.cancel_appointment_by_id_and_client(appointment_id, "Ann")


def test_cancel_all_leaves_commit_to_caller(clinic):
    book(clinic)
    book(clinic, start=time(9, 0), client="Bob")
    commits = clinic.uow.commits
    summary = clinic.booking.cancel_all_appointments_for_doctor(clinic.doctor)
    assert "Dr. House" in summary
    assert clinic.uow.commits == commits
    assert all(a.status == AppointmentStatus.CANCELED for a in clinic.appointments.rows.values())


def test_get_appointment_wrong_id(clinic):
    with pytest.raises(DataNotFoundException, match="Wrong ID"):
        clinic.booking.get_appointment(99)


def test_list_appointments_sorted(clinic):
    book(clinic, start=time(10, 0))
    book(clinic, start=time(8, 0), client="Bob")
    listed = clinic.booking.list_appointments("Dr. House", NEXT_MONDAY)
    assert [a.start_time for a in listed] == [time(8, 0), time(10, 0)]


def test_doctor_deactivated_before_lock_is_not_booked(clinic, monkeypatch):
    lock = clinic.doctors.lock

    def deactivate_then_lock(doctor_id):
        monkeypatch.setattr(clinic.doctors, "lock", lock)
        clinic.cascade.deactivate_doctor("Dr. House")
        return lock(doctor_id)

    monkeypatch.setattr(clinic.doctors, "lock", deactivate_then_lock)
    with pytest.raises(DataNotFoundException, match="Dr. House"):
        book(clinic)
    assert clinic.appointments.rows == {}
    assert clinic.uow.rollbacks == 1
