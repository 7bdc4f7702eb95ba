from typing import ContextManager, Hashable, Protocol


class LockRegistry(Protocol):
    def hold(self, key: Hashable) -> ContextManager[None]:
        """Block until ``key`` is free and keep it for the duration of the ``with`` block."""
        ...
