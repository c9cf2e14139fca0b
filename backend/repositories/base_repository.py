"""
Base repository providing common CRUD operations.
"""

from typing import Generic, TypeVar, List, Optional, Type, Tuple
from sqlalchemy.orm import Session, Query

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.

    Repositories only flush; committing or rolling back is the caller's job so
    that a service can group several repository calls into one transaction.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def create(self, obj: T) -> T:
        """
        Add a new record and flush it so defaults (id, timestamps) are populated.

        Args:
            obj: Model instance to create

        Returns:
            Created model instance
        """
        self.db.add(obj)
        self.db.flush()
        return obj

    def get_by_id(self, id: str) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.id == id).first()

    def get_all(self) -> List[T]:
        """
        Retrieve all records, newest first.

        Returns:
            List of model instances
        """
        return self.db.query(self.model).order_by(self.model.created_at.desc()).all()

    def update(self, obj: T) -> T:
        """
        Flush pending changes on an existing record.

        Args:
            obj: Model instance with updated values

        Returns:
            Updated model instance
        """
        self.db.flush()
        return obj

    def delete(self, obj: T) -> None:
        """
        Delete a record from the database.

        Args:
            obj: Model instance to delete
        """
        self.db.delete(obj)
        self.db.flush()

    def exists(self, id: str) -> bool:
        """
        Check if a record exists by ID.

        Args:
            id: Primary key value

        Returns:
            True if exists, False otherwise
        """
        return self.db.query(self.model.id).filter(self.model.id == id).first() is not None

    @staticmethod
    def paginate(query: Query, page: int, per_page: int) -> Tuple[List[T], int]:
        """
        Apply offset/limit to an already filtered and ordered query.

        Args:
            query: Query to page through
            page: 1-based page number
            per_page: Page size

        Returns:
            Tuple of (items on the page, total matching rows)
        """
        total = query.order_by(None).count()
        items = query.offset((page - 1) * per_page).limit(per_page).all()
        return items, total
