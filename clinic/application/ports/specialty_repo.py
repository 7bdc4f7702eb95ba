from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass
class SpecialtyDto:
    id: Optional[int]
    name: str
    is_active: bool = True


class SpecialtyRepository(Protocol):
    def find_active_by_name(self, name: str) -> Optional[SpecialtyDto]:
        ...

    def find_active_by_id(self, specialty_id: int) -> Optional[SpecialtyDto]:
        ...

    def list_active(self) -> List[SpecialtyDto]:
        ...

    def save(self, specialty: SpecialtyDto) -> SpecialtyDto:
        ...
