# clinic/db/models/enums.py
import enum


class AppointmentStatus(str, enum.Enum):
    NEW = "NEW"
    CANCELED = "CANCELED"


class VacationType(str, enum.Enum):
    VACATION = "VACATION"
    SICK_LEAVE = "SICK_LEAVE"
    OTHER = "OTHER"


class VacationStatus(str, enum.Enum):
    PLANNED = "PLANNED"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    CANCELED = "CANCELED"

    @property
    def is_terminal(self) -> bool:
        return self in (VacationStatus.DONE, VacationStatus.CANCELED)

    def can_transition_to(self, target: "VacationStatus") -> bool:
        return target in _VACATION_TRANSITIONS[self]


# Forward-only; DONE and CANCELED accept nothing
_VACATION_TRANSITIONS = {
    VacationStatus.PLANNED: {VacationStatus.IN_PROGRESS, VacationStatus.CANCELED},
    VacationStatus.IN_PROGRESS: {VacationStatus.DONE, VacationStatus.CANCELED},
    VacationStatus.DONE: set(),
    VacationStatus.CANCELED: set(),
}
