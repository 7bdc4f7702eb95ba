import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from ....application.ports.unit_of_work import UnitOfWork
from ....exceptions import DataMismatchException

logger = logging.getLogger(__name__)


class SqlUnitOfWork(UnitOfWork):
    def __init__(self, session: Session):
        self.session = session

    def __enter__(self) -> "SqlUnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None:
            self.rollback()
        return False

    def commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning(f"Commit rejected by the database: {e.orig}")
            raise DataMismatchException("Unique constraint violation") from e

    def rollback(self) -> None:
        self.session.rollback()
