from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Protocol

from ...db.models.enums import VacationStatus, VacationType


@dataclass
class VacationDto:
    id: Optional[int]
    doctor_id: int
    start_date: date
    end_date: date
    type: VacationType
    status: VacationStatus = VacationStatus.PLANNED
    doctor_name: Optional[str] = None

    def covers(self, day: date) -> bool:
        # Boundary days stay bookable; only the days strictly between them are blocked
        return self.status != VacationStatus.CANCELED and self.start_date < day < self.end_date


class VacationRepository(Protocol):
    def exists_overlap(self, start_date: date, end_date: date, doctor_id: Optional[int] = None) -> bool:
        """True when a non-CANCELED vacation intersects [start_date, end_date].

        ``doctor_id=None`` checks every doctor of the clinic.
        """
        ...

    def find_by_doctor_and_start_date(self, doctor_id: int, start_date: date) -> Optional[VacationDto]:
        """The non-CANCELED vacation of the doctor starting on ``start_date``."""
        ...

    def find_all_by_doctor(self, doctor_id: int) -> List[VacationDto]:
        ...

    def find_all_by_status(self, statuses: Iterable[VacationStatus], doctor_id: Optional[int] = None) -> List[VacationDto]:
        ...

    def find_all_by_type(self, vacation_type: VacationType, doctor_id: Optional[int] = None) -> List[VacationDto]:
        ...

    def find_all_by_doctor_within(self, doctor_id: int, start_date: Optional[date], end_date: Optional[date]) -> List[VacationDto]:
        ...

    def save(self, vacation: VacationDto) -> VacationDto:
        ...

    def save_all(self, vacations: List[VacationDto]) -> None:
        ...
