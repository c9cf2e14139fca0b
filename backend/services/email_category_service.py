"""
Email Category Service

Business rules for email categories: unique titles, sanitized input and
guarded deletion.
"""

from typing import List
from sqlalchemy.orm import Session
import logging

from constants import FieldLimits
from dtos.request import EmailCategoryCreateRequest, EmailCategoryUpdateRequest
from exceptions import ConflictError, NotFoundError, ValidationError
from models import EmailCategory
from repositories.email_category_repository import EmailCategoryRepository
from services.transaction import unit_of_work
from utils.logging_utils import log_operation
from utils.text_helpers import strip_html
from utils.uuid_helper import parse_uuid

logger = logging.getLogger(__name__)


class EmailCategoryService:
    """Service for email category business logic."""

    def __init__(self, db: Session):
        """
        Initialize EmailCategoryService.

        Args:
            db: Database session
        """
        self.db = db
        self.category_repo = EmailCategoryRepository(db)

    def list_categories(self) -> List[EmailCategory]:
        return self.category_repo.get_all()

    def get_category(self, category_id: str) -> EmailCategory:
        """
        Get a category by ID.

        Raises:
            ValidationError: If category_id is not a UUID
            NotFoundError: If no such category exists
        """
        category_id = parse_uuid(category_id, "email category id")
        category = self.category_repo.get_by_id(category_id)
        if not category:
            raise NotFoundError("Email category", category_id)
        return category

    @log_operation("create_email_category")
    def create_category(self, request: EmailCategoryCreateRequest) -> EmailCategory:
        """
        Create a category with a unique, HTML-free title.

        Raises:
            ValidationError: If the title is too short once HTML is stripped
            ConflictError: If the title is taken
        """
        title = self._clean_title(request.title)
        if self.category_repo.get_by_title(title):
            raise ConflictError(f"Email category with title '{title}' already exists", field="title")

        category = EmailCategory(title=title)
        with unit_of_work(self.db, "create_email_category", f"Email category with title '{title}' already exists"):
            self.category_repo.create(category)

        self.db.refresh(category)
        return category

    @log_operation("update_email_category")
    def update_category(self, category_id: str, request: EmailCategoryUpdateRequest) -> EmailCategory:
        """
        Rename a category. A request without a title changes nothing.

        Raises:
            NotFoundError: If no such category exists
            ConflictError: If another category already has the title
        """
        category = self.get_category(category_id)
        if request.title is None:
            return category

        title = self._clean_title(request.title)
        if self.category_repo.get_by_title(title, exclude_id=category.id):
            raise ConflictError(f"Email category with title '{title}' already exists", field="title")

        with unit_of_work(self.db, "update_email_category", f"Email category with title '{title}' already exists"):
            category.title = title
            self.category_repo.update(category)

        self.db.refresh(category)
        return category

    @log_operation("delete_email_category")
    def delete_category(self, category_id: str) -> None:
        """
        Delete a category together with its email contents.

        Raises:
            NotFoundError: If no such category exists
            ConflictError: If forms still reference the category
        """
        category = self.get_category(category_id)

        form_count = self.category_repo.count_forms(category.id)
        if form_count:
            raise ConflictError(
                f"Cannot delete email category: it is used by {form_count} form(s).",
                field="email_category_id"
            )

        with unit_of_work(self.db, "delete_email_category", "Cannot delete email category: it is still referenced."):
            removed = self.category_repo.delete_with_contents(category)

        logger.info(f"Deleted email category {category_id} and {removed} email content(s)")

    @staticmethod
    def _clean_title(raw: str) -> str:
        title = strip_html(raw)
        if len(title) < FieldLimits.TITLE_MIN:
            raise ValidationError(
                f"Title must be at least {FieldLimits.TITLE_MIN} characters of plain text",
                invalid_fields={"title": raw}
            )
        return title
