"""
Email category repository.
"""

from typing import Optional
from sqlalchemy.orm import Session

from models import EmailCategory, EmailContent, Form
from .base_repository import BaseRepository


class EmailCategoryRepository(BaseRepository[EmailCategory]):
    """Repository for EmailCategory model operations."""

    def __init__(self, db: Session):
        super().__init__(db, EmailCategory)

    def get_by_title(self, title: str, exclude_id: Optional[str] = None) -> Optional[EmailCategory]:
        """
        Find a category by its exact title.

        Args:
            title: Category title
            exclude_id: Category to ignore (the one being updated)

        Returns:
            Matching category or None
        """
        query = self.db.query(self.model).filter(self.model.title == title)
        if exclude_id:
            query = query.filter(self.model.id != exclude_id)
        return query.first()

    def count_forms(self, category_id: str) -> int:
        """Number of forms that reference the category."""
        return self.db.query(Form).filter(Form.email_category_id == category_id).count()

    def delete_with_contents(self, category: EmailCategory) -> int:
        """
        Delete a category and all of its email contents.

        Args:
            category: Category to delete

        Returns:
            Number of email contents removed
        """
        removed = self.db.query(EmailContent).filter(
            EmailContent.email_category_id == category.id
        ).delete(synchronize_session=False)
        self.db.expire(category, ['contents'])
        self.delete(category)
        return removed
