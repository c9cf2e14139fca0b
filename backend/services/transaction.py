"""
Transaction helper shared by the services.

Repositories only flush. A service wraps each write operation in
``unit_of_work`` so everything it did is committed together or rolled back.
"""

from contextlib import contextmanager
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from exceptions import ConflictError, DatabaseError

logger = logging.getLogger(__name__)


@contextmanager
def unit_of_work(db: Session, operation: str, conflict_message: str = "Resource conflicts with existing data"):
    """
    Commit on success, roll back on any error.

    IntegrityError (a constraint the pre-checks could not see, e.g. a concurrent
    insert) becomes ConflictError; other SQLAlchemy errors become DatabaseError;
    anything else is re-raised after the rollback.

    Args:
        db: Session the work is done in
        operation: Operation name for logs and DatabaseError details
        conflict_message: Message used when a constraint is violated
    """
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"{operation} - integrity error, rolled back: {e.orig}")
        raise ConflictError(conflict_message) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"{operation} - database error, rolled back: {e}", exc_info=True)
        raise DatabaseError(operation, str(e)) from e
    except Exception:
        db.rollback()
        raise
