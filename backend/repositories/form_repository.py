"""
Form repository: the form aggregate (form -> sections -> fields).
"""

from datetime import date, datetime, time, timedelta
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session, selectinload

from constants import FormSort
from models import Form, FormSection, FormSubmission
from .base_repository import BaseRepository

_SORT_COLUMNS = {
    FormSort.NAME_ASC: (Form.name.asc(), Form.id.asc()),
    FormSort.NAME_DESC: (Form.name.desc(), Form.id.desc()),
    FormSort.UPDATED_AT_ASC: (Form.updated_at.asc(), Form.id.asc()),
    FormSort.UPDATED_AT_DESC: (Form.updated_at.desc(), Form.id.desc()),
}


class FormRepository(BaseRepository[Form]):
    """Repository for Form model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Form)

    def get_with_structure(self, form_id: str) -> Optional[Form]:
        """
        Get a form with sections and fields eagerly loaded.

        Sections and fields come back ordered by order_index through the
        relationship definitions.

        Args:
            form_id: Form UUID

        Returns:
            Form aggregate, or None if not found
        """
        return self.db.query(self.model).options(
            selectinload(self.model.sections).selectinload(FormSection.fields)
        ).filter(self.model.id == form_id).populate_existing().first()

    def get_by_slug(self, slug: str, exclude_id: Optional[str] = None) -> Optional[Form]:
        """
        Find a form by slug.

        Args:
            slug: URL slug
            exclude_id: Form to ignore (the one being updated)

        Returns:
            Matching form or None
        """
        query = self.db.query(self.model).filter(self.model.slug == slug)
        if exclude_id:
            query = query.filter(self.model.id != exclude_id)
        return query.first()

    def replace_sections(self, form: Form, sections: List[FormSection]) -> Form:
        """
        Replace every section (and therefore every field) of a form.

        Existing rows are deleted and flushed before the new rows are inserted,
        all within the caller's transaction.

        Args:
            form: Form whose sections are replaced
            sections: New, unsaved sections with their fields attached

        Returns:
            The form with its new sections
        """
        form.sections.clear()
        self.db.flush()

        form.sections.extend(sections)
        self.db.flush()
        return form

    def has_submissions(self, form_id: str) -> bool:
        """Check whether any submission references the form."""
        return self.db.query(FormSubmission.id).filter(
            FormSubmission.form_id == form_id
        ).first() is not None

    def list_page(
        self,
        name: Optional[str],
        created_on: Optional[date],
        sort: FormSort,
        page: int,
        per_page: int
    ) -> Tuple[List[Form], int]:
        """
        List forms for the CMS index page.

        Args:
            name: Case-insensitive substring of the form name
            created_on: Only forms created on this calendar day
            sort: Ordering option
            page: 1-based page number
            per_page: Page size

        Returns:
            Tuple of (forms on the page, total matching forms)
        """
        query = self.db.query(self.model)

        if name:
            query = query.filter(self.model.name.ilike(f"%{name}%"))

        if created_on:
            day_start = datetime.combine(created_on, time.min)
            query = query.filter(
                self.model.created_at >= day_start,
                self.model.created_at < day_start + timedelta(days=1),
            )

        query = query.order_by(*_SORT_COLUMNS[sort])
        return self.paginate(query, page, per_page)
