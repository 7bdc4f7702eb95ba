from dataclasses import dataclass
from datetime import time
from typing import List, Optional, Protocol


@dataclass
class WorkingHoursDto:
    id: Optional[int]
    doctor_id: int
    day_of_week: int
    start_time: time
    end_time: time
    doctor_name: Optional[str] = None


class WorkingHoursRepository(Protocol):
    def find_by_doctor_and_day(self, doctor_id: int, day_of_week: int) -> Optional[WorkingHoursDto]:
        ...

    def find_all(self, doctor_id: Optional[int] = None, day_of_week: Optional[int] = None) -> List[WorkingHoursDto]:
        ...

    def save(self, working_hours: WorkingHoursDto) -> WorkingHoursDto:
        ...

    def delete_for_doctor_and_day(self, doctor_id: int, day_of_week: int) -> int:
        ...

    def delete_all_for_doctor(self, doctor_id: int) -> int:
        ...
