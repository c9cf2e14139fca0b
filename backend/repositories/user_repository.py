"""
User repository for account lookups.
"""

from typing import Optional
from sqlalchemy.orm import Session

from models import User
from .base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by email address.

        Args:
            email: Normalized (lowercase) email

        Returns:
            User or None if no account uses this email
        """
        return self.db.query(self.model).filter(self.model.email == email).first()
