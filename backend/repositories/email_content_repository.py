"""
Email content repository.
"""

from typing import List, Optional
from sqlalchemy.orm import Session, joinedload

from models import EmailContent
from .base_repository import BaseRepository


class EmailContentRepository(BaseRepository[EmailContent]):
    """Repository for EmailContent model operations."""

    def __init__(self, db: Session):
        super().__init__(db, EmailContent)

    def get_with_category(self, content_id: str) -> Optional[EmailContent]:
        """
        Get an email content with its category eagerly loaded.

        Args:
            content_id: Email content UUID

        Returns:
            EmailContent or None if not found
        """
        return self.db.query(self.model).options(
            joinedload(self.model.email_category)
        ).filter(self.model.id == content_id).first()

    def find_duplicate(
        self,
        email_category_id: str,
        language: str,
        label: str,
        exclude_id: Optional[str] = None
    ) -> Optional[EmailContent]:
        """
        Find a content that already uses the (category, language, label) combination.

        Args:
            email_category_id: Category UUID
            language: Language code
            label: Content label
            exclude_id: Content to ignore (the one being updated)

        Returns:
            Conflicting content or None
        """
        query = self.db.query(self.model).filter(
            self.model.email_category_id == email_category_id,
            self.model.language == language,
            self.model.label == label,
        )
        if exclude_id:
            query = query.filter(self.model.id != exclude_id)
        return query.first()

    def get_filtered(
        self,
        email_category_id: Optional[str] = None,
        language: Optional[str] = None,
        label: Optional[str] = None
    ) -> List[EmailContent]:
        """
        List email contents matching the given filters, newest first.

        Args:
            email_category_id: Only contents of this category
            language: Only contents in this language
            label: Only contents with this exact label

        Returns:
            List of email contents with their categories loaded
        """
        query = self.db.query(self.model).options(joinedload(self.model.email_category))
        if email_category_id:
            query = query.filter(self.model.email_category_id == email_category_id)
        if language:
            query = query.filter(self.model.language == language)
        if label:
            query = query.filter(self.model.label == label)
        return query.order_by(self.model.created_at.desc()).all()

    def get_for_category(self, email_category_id: str) -> List[EmailContent]:
        """All contents of a category, any language."""
        return self.get_filtered(email_category_id=email_category_id)
