from datetime import date, time

import pytest

from clinic.application.ports.appointments_repo import AppointmentDto
from clinic.application.ports.working_hours_repo import WorkingHoursDto
from clinic.application.services.slot_calculator import SlotPolicy, compute_available_slots
from clinic.db.models.enums import AppointmentStatus
from clinic.exceptions import DataMismatchException

DAY = date(2024, 1, 8)


def hours(start=time(8, 0), end=time(12, 0)):
    return WorkingHoursDto(id=1, doctor_id=1, day_of_week=1, start_time=start, end_time=end)


def appt(start, end, status=AppointmentStatus.NEW):
    return AppointmentDto(
        id=None, doctor_id=1, investigation_id=1, client_name="c", appointment_date=DAY,
        start_time=start, end_time=end, price=100.0, status=status,
    )


def test_free_morning_gives_every_half_hour():
    slots = compute_available_slots(hours(), [], 30)
    assert slots == [time(h, m) for h in range(8, 12) for m in (0, 30)]


def test_margin_blocks_the_slot_before_a_booking():
    slots = compute_available_slots(hours(), [appt(time(9, 0), time(9, 30))], 30)
    assert slots == [time(8, 0), time(9, 30), time(10, 0), time(10, 30), time(11, 0), time(11, 30)]


def test_exact_keeps_the_slot_that_ends_at_the_booking():
    slots = compute_available_slots(hours(), [appt(time(9, 0), time(9, 30))], 30, policy=SlotPolicy.EXACT)
    assert time(8, 30) in slots
    assert time(9, 0) not in slots
    assert len(slots) == 7


def test_canceled_appointments_do_not_block():
    slots = compute_available_slots(hours(), [appt(time(9, 0), time(9, 30), AppointmentStatus.CANCELED)], 30)
    assert len(slots) == 8


def test_fully_booked_window_is_empty():
    assert compute_available_slots(hours(), [appt(time(8, 0), time(12, 0))], 30) == []


def test_long_investigation_must_end_inside_window():
    slots = compute_available_slots(hours(end=time(10, 0)), [], 60)
    assert slots == [time(8, 0), time(8, 30), time(9, 0)]


def test_window_shorter_than_duration():
    assert compute_available_slots(hours(end=time(8, 20)), [], 30) == []


def test_custom_step():
    slots = compute_available_slots(hours(end=time(9, 0)), [], 30, slot_step=15)
    assert slots == [time(8, 0), time(8, 15), time(8, 30)]


@pytest.mark.parametrize("duration", [0, -30])
def test_non_positive_duration_rejected(duration):
    with pytest.raises(DataMismatchException):
        compute_available_slots(hours(), [], duration)


def test_results_never_overlap_bookings_under_exact_policy():
    booked = [appt(time(8, 30), time(9, 15)), appt(time(10, 0), time(10, 45))]
    for slot in compute_available_slots(hours(), booked, 30, policy=SlotPolicy.EXACT):
        end = time(slot.hour + (slot.minute + 30) // 60, (slot.minute + 30) % 60)
        for b in booked:
            assert not (slot < b.end_time and end > b.start_time)
