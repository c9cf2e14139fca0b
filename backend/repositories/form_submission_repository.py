"""
Form submission repository.
"""

from typing import List, Optional, Tuple
from sqlalchemy.orm import Session, joinedload

from models import FormSubmission
from .base_repository import BaseRepository


class FormSubmissionRepository(BaseRepository[FormSubmission]):
    """Repository for FormSubmission model operations."""

    def __init__(self, db: Session):
        super().__init__(db, FormSubmission)

    def get_with_form(self, submission_id: str) -> Optional[FormSubmission]:
        """
        Get a submission with its form eagerly loaded.

        Args:
            submission_id: Submission UUID

        Returns:
            FormSubmission or None if not found
        """
        return self.db.query(self.model).options(
            joinedload(self.model.form)
        ).filter(self.model.id == submission_id).first()

    def list_for_form(
        self,
        form_id: str,
        sort_column: str,
        descending: bool,
        page: int,
        limit: int
    ) -> Tuple[List[FormSubmission], int]:
        """
        Page through the submissions of one form.

        Args:
            form_id: Form UUID
            sort_column: Name of a FormSubmission column (already whitelisted)
            descending: Sort direction
            page: 1-based page number
            limit: Page size

        Returns:
            Tuple of (submissions on the page, total submissions for the form)
        """
        column = getattr(self.model, sort_column)
        order = column.desc() if descending else column.asc()
        query = self.db.query(self.model).filter(
            self.model.form_id == form_id
        ).order_by(order, self.model.id)
        return self.paginate(query, page, limit)
