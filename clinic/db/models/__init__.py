# Models package (re-export feature modules for stable imports)
from .enums import AppointmentStatus, VacationStatus, VacationType
from .catalog.specialty import Specialty
from .catalog.doctor import Doctor
from .catalog.investigation import Investigation
from .catalog.working_hours import WorkingHours
from .catalog.holiday import Holiday
from .scheduling.vacation import Vacation
from .scheduling.appointment import Appointment

__all__ = [
    "AppointmentStatus",
    "VacationStatus",
    "VacationType",
    "Specialty",
    "Doctor",
    "Investigation",
    "WorkingHours",
    "Holiday",
    "Vacation",
    "Appointment",
]
