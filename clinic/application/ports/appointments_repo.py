from dataclasses import dataclass
from datetime import date, time, datetime
from typing import List, Optional, Protocol

from ...db.models.enums import AppointmentStatus


@dataclass
class AppointmentDto:
    id: Optional[int]
    doctor_id: int
    investigation_id: int
    client_name: str
    appointment_date: date
    start_time: time
    end_time: time
    price: float
    status: AppointmentStatus = AppointmentStatus.NEW
    doctor_name: Optional[str] = None
    investigation_name: Optional[str] = None
    created_at: Optional[datetime] = None


class AppointmentRepository(Protocol):
    def find_by_doctor_and_date(self, doctor_id: int, appointment_date: date, status: Optional[AppointmentStatus] = None) -> List[AppointmentDto]:
        ...

    def exists_overlap(self, doctor_id: int, appointment_date: date, start_time: time, end_time: time) -> bool:
        """True when a NEW appointment of the doctor intersects [start_time, end_time) on that date."""
        ...

    def find_by_id_and_client_and_status(self, appointment_id: int, client_name: str, status: AppointmentStatus) -> Optional[AppointmentDto]:
        ...

    def find_all_by_doctor(self, doctor_id: int) -> List[AppointmentDto]:
        ...

    def get_by_id(self, appointment_id: int) -> Optional[AppointmentDto]:
        ...

    def save(self, appointment: AppointmentDto) -> AppointmentDto:
        ...

    def save_all(self, appointments: List[AppointmentDto]) -> None:
        ...
