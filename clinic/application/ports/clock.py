from typing import Protocol
from datetime import date


class Clock(Protocol):
    def current_date(self) -> date:
        ...
