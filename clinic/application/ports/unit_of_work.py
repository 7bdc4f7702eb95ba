from typing import Protocol


class UnitOfWork(Protocol):
    """Transaction boundary shared by the repositories of one request.

    Leaving the ``with`` block through an exception rolls back everything
    written since the last commit.
    """

    def __enter__(self) -> "UnitOfWork":
        ...

    def __exit__(self, exc_type, exc, tb) -> bool:
        ...

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...
