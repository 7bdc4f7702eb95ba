from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Protocol


@dataclass
class HolidayDto:
    id: Optional[int]
    start_date: date
    end_date: date
    description: str
    is_active: bool = True


class HolidayRepository(Protocol):
    def is_holiday(self, day: date) -> bool:
        ...

    def find_active_by_id(self, holiday_id: int) -> Optional[HolidayDto]:
        ...

    def find_active_by_description(self, description: str) -> Optional[HolidayDto]:
        ...

    def list_active(self) -> List[HolidayDto]:
        ...

    def save(self, holiday: HolidayDto) -> HolidayDto:
        ...
