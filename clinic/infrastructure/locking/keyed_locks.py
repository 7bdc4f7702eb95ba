import threading
from contextlib import contextmanager
from typing import Dict, Hashable, Iterator

from ...application.ports.locks import LockRegistry


class KeyedLocks(LockRegistry):
    """One re-entrant lock per key, created on first use.

    Used to serialise bookings, vacation inserts and deactivations of the
    same doctor inside one process; the database row lock taken in the same
    transaction covers other processes. Entries are never evicted, so the
    registry holds one lock per doctor id seen since startup.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[Hashable, threading.RLock] = {}

    def _lock_for(self, key: Hashable) -> threading.RLock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.RLock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        lock = self._lock_for(key)
        with lock:
            yield
