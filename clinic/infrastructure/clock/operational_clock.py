import logging
import threading
from datetime import date, timedelta
from typing import Optional

from ...application.ports.clock import Clock

logger = logging.getLogger(__name__)


class OperationalClock(Clock):
    """The clinic's notion of "today".

    Starts at ``start_date`` (the real current date when omitted) and only
    moves when advanced explicitly, so past-date checks and vacation status
    changes can be driven without waiting for the calendar.
    """

    def __init__(self, start_date: Optional[date] = None):
        self._lock = threading.Lock()
        self._current = start_date or date.today()

    def current_date(self) -> date:
        with self._lock:
            return self._current

    def advance(self, days: int = 1) -> date:
        if days < 0:
            raise ValueError("The operational date can only move forward")
        with self._lock:
            self._current = self._current + timedelta(days=days)
            current = self._current
        logger.info(f"Operational date advanced by {days} day(s) to {current}")
        return current

    def set_date(self, new_date: date) -> date:
        with self._lock:
            if new_date < self._current:
                raise ValueError("The operational date can only move forward")
            self._current = new_date
        logger.info(f"Operational date set to {new_date}")
        return new_date
