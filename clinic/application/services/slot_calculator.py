import enum
from datetime import date, datetime, time, timedelta
from typing import Iterable, List

from ...db.models.enums import AppointmentStatus
from ...exceptions import DataMismatchException
from ..ports.appointments_repo import AppointmentDto
from ..ports.working_hours_repo import WorkingHoursDto


class SlotPolicy(str, enum.Enum):
    # MARGIN: a booking also blocks the `duration` minutes before it starts
    MARGIN = "margin"
    # EXACT: half-open interval intersection only
    EXACT = "exact"


# Anchor date used to do time arithmetic on naive times
_ANCHOR = date(2000, 1, 1)


def _at(t: time) -> datetime:
    return datetime.combine(_ANCHOR, t)


def _is_blocked(candidate: datetime, duration: timedelta, appt_start: datetime, appt_end: datetime, policy: SlotPolicy) -> bool:
    if policy == SlotPolicy.EXACT:
        return candidate < appt_end and candidate + duration > appt_start
    return appt_start - duration <= candidate < appt_end


def compute_available_slots(
    working_hours: WorkingHoursDto,
    appointments: Iterable[AppointmentDto],
    duration: int,
    slot_step: int = 30,
    policy: SlotPolicy = SlotPolicy.MARGIN,
) -> List[time]:
    """Free start times for one doctor on one day.

    Candidates are generated from ``working_hours.start_time`` every ``slot_step``
    minutes for as long as an investigation of ``duration`` minutes still ends
    within the working window. CANCELED appointments never block.
    """
    if duration <= 0:
        raise DataMismatchException(f"Investigation duration must be positive, got {duration}")
    if slot_step <= 0:
        raise DataMismatchException(f"Slot step must be positive, got {slot_step}")

    length = timedelta(minutes=duration)
    step = timedelta(minutes=slot_step)
    window_end = _at(working_hours.end_time)

    booked = [
        (_at(a.start_time), _at(a.end_time))
        for a in appointments
        if a.status == AppointmentStatus.NEW
    ]

    slots: List[time] = []
    candidate = _at(working_hours.start_time)
    while candidate + length <= window_end:
        if not any(_is_blocked(candidate, length, start, end, policy) for start, end in booked):
            slots.append(candidate.time())
        candidate += step
    return slots
