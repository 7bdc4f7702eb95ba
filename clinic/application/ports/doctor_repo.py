from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass
class DoctorDto:
    id: Optional[int]
    name: str
    specialty_id: int
    price_rate: float
    is_active: bool = True
    specialty_name: Optional[str] = None


class DoctorRepository(Protocol):
    def find_active_by_name(self, name: str) -> Optional[DoctorDto]:
        ...

    def find_active_by_id(self, doctor_id: int) -> Optional[DoctorDto]:
        ...

    def find_active_by_specialty(self, specialty_id: int) -> List[DoctorDto]:
        ...

    def list_active(self) -> List[DoctorDto]:
        ...

    def lock(self, doctor_id: int) -> Optional[DoctorDto]:
        """Hold a write lock on the doctor row until the surrounding transaction ends.

        Returns the row as read under the lock, or None once the doctor is inactive.
        """
        ...

    def save(self, doctor: DoctorDto) -> DoctorDto:
        ...

    def save_all(self, doctors: List[DoctorDto]) -> None:
        ...
