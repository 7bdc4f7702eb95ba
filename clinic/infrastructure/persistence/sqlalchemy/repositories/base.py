import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from .....exceptions import DataMismatchException

logger = logging.getLogger(__name__)


def flush(session: Session) -> None:
    """Push pending changes so generated ids and constraint violations surface now."""
    try:
        session.flush()
    except IntegrityError as e:
        session.rollback()
        logger.warning(f"Write rejected by the database: {e.orig}")
        raise DataMismatchException("Unique constraint violation") from e
