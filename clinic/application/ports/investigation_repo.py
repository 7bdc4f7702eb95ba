from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass
class InvestigationDto:
    id: Optional[int]
    name: str
    specialty_id: int
    base_price: float
    duration: int
    is_active: bool = True
    specialty_name: Optional[str] = None


class InvestigationRepository(Protocol):
    def find_active_by_name(self, name: str) -> Optional[InvestigationDto]:
        ...

    def find_active_by_id(self, investigation_id: int) -> Optional[InvestigationDto]:
        ...

    def find_active_by_specialty(self, specialty_id: int) -> List[InvestigationDto]:
        ...

    def find_active_by_duration(self, duration: int) -> List[InvestigationDto]:
        ...

    def list_active(self) -> List[InvestigationDto]:
        ...

    def save(self, investigation: InvestigationDto) -> InvestigationDto:
        ...

    def save_all(self, investigations: List[InvestigationDto]) -> None:
        ...
