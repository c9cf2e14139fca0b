"""
Email Content Service

Handles the email templates stored per category, language and label.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from constants import FieldLimits, PageLanguage
from dtos.request import EmailContentCreateRequest, EmailContentUpdateRequest
from exceptions import ConflictError, NotFoundError, ValidationError
from models import EmailContent
from repositories.email_category_repository import EmailCategoryRepository
from repositories.email_content_repository import EmailContentRepository
from services.transaction import unit_of_work
from utils.logging_utils import log_operation
from utils.text_helpers import strip_html
from utils.uuid_helper import parse_uuid

logger = logging.getLogger(__name__)

# Free-text columns passed through strip_html before storage
SANITIZED_FIELDS = (
    "label",
    "send_to",
    "cc_email",
    "bcc_email",
    "send_from_email",
    "send_from_name",
    "subject",
    "top_img_link",
    "header",
    "paragraph",
    "footer",
    "footer_image_link",
)


class EmailContentService:
    """Service for email content business logic."""

    def __init__(self, db: Session):
        """
        Initialize EmailContentService.

        Args:
            db: Database session
        """
        self.db = db
        self.content_repo = EmailContentRepository(db)
        self.category_repo = EmailCategoryRepository(db)

    def get_content(self, content_id: str) -> EmailContent:
        """
        Get an email content with its category.

        Raises:
            ValidationError: If content_id is not a UUID
            NotFoundError: If no such content exists
        """
        content_id = parse_uuid(content_id, "email content id")
        content = self.content_repo.get_with_category(content_id)
        if not content:
            raise NotFoundError("Email content", content_id)
        return content

    def list_contents(
        self,
        email_category_id: Optional[str] = None,
        language: Optional[PageLanguage] = None,
        label: Optional[str] = None
    ) -> List[EmailContent]:
        if email_category_id:
            email_category_id = parse_uuid(email_category_id, "email_category_id")
        return self.content_repo.get_filtered(
            email_category_id=email_category_id,
            language=language.value if language else None,
            label=label,
        )

    def get_contents_by_category_and_language(self, email_category_id: str, language: PageLanguage) -> List[EmailContent]:
        """
        All contents of a category in one language.

        Raises:
            NotFoundError: If the category does not exist
        """
        email_category_id = parse_uuid(email_category_id, "email_category_id")
        if not self.category_repo.exists(email_category_id):
            raise NotFoundError("Email category", email_category_id)
        return self.content_repo.get_filtered(email_category_id=email_category_id, language=language.value)

    @log_operation("create_email_content")
    def create_content(self, request: EmailContentCreateRequest) -> EmailContent:
        """
        Create an email content.

        Raises:
            ValidationError: If the category does not exist, a required field is empty after sanitizing
                or the sanitized label is outside the allowed length
            ConflictError: If (category, language, label) is taken
        """
        if not self.category_repo.exists(request.email_category_id):
            raise ValidationError(
                f"email_category_id '{request.email_category_id}' not found",
                invalid_fields={"email_category_id": request.email_category_id}
            )

        values = self._sanitize(request.model_dump(exclude={"email_category_id", "language"}))
        self._require_text(values, ("label", "send_from_email", "subject"))
        self._check_label(values["label"])
        language = request.language.value

        conflict = self._conflict_message(values["label"], language)
        if self.content_repo.find_duplicate(request.email_category_id, language, values["label"]):
            raise ConflictError(conflict, field="label")

        content = EmailContent(email_category_id=request.email_category_id, language=language, **values)
        with unit_of_work(self.db, "create_email_content", conflict):
            self.content_repo.create(content)

        return self.get_content(content.id)

    @log_operation("update_email_content")
    def update_content(self, content_id: str, request: EmailContentUpdateRequest) -> EmailContent:
        """
        Apply a partial update. Fields missing from the request keep their value.

        Raises:
            NotFoundError: If no such content exists
            ConflictError: If the new (language, label) clashes with another content
        """
        content = self.get_content(content_id)

        changes = request.model_dump(exclude_unset=True)
        if changes.get("language") is not None:
            changes["language"] = PageLanguage(changes["language"]).value
        else:
            changes.pop("language", None)
        changes = self._sanitize(changes)
        self._require_text(changes, tuple(k for k in ("label", "send_from_email", "subject") if k in changes))
        if "label" in changes:
            self._check_label(changes["label"])

        language = changes.get("language", content.language)
        label = changes.get("label", content.label)
        conflict = self._conflict_message(label, language)
        if self.content_repo.find_duplicate(content.email_category_id, language, label, exclude_id=content.id):
            raise ConflictError(conflict, field="label")

        with unit_of_work(self.db, "update_email_content", conflict):
            for key, value in changes.items():
                setattr(content, key, value)
            self.content_repo.update(content)

        return self.get_content(content.id)

    @log_operation("delete_email_content")
    def delete_content(self, content_id: str) -> None:
        content = self.get_content(content_id)
        with unit_of_work(self.db, "delete_email_content"):
            self.content_repo.delete(content)

    @staticmethod
    def _sanitize(values: dict) -> dict:
        cleaned = {}
        for key, value in values.items():
            if key in SANITIZED_FIELDS:
                # None means "not provided" in partial updates; columns are NOT NULL
                cleaned[key] = strip_html(value) if value is not None else ""
            else:
                cleaned[key] = value
        return cleaned

    @staticmethod
    def _require_text(values: dict, keys: tuple) -> None:
        empty = [k for k in keys if not values.get(k)]
        if empty:
            raise ValidationError(
                f"Fields must not be empty: {', '.join(empty)}",
                invalid_fields={k: values.get(k) for k in empty}
            )

    @staticmethod
    def _check_label(label: str) -> None:
        # Length is enforced on the stored (sanitized) text, not on the raw input
        if not FieldLimits.EMAIL_LABEL_MIN <= len(label) <= FieldLimits.EMAIL_LABEL_MAX:
            raise ValidationError(
                f"Label must be {FieldLimits.EMAIL_LABEL_MIN} to {FieldLimits.EMAIL_LABEL_MAX} characters of plain text",
                invalid_fields={"label": label}
            )

    @staticmethod
    def _conflict_message(label: str, language: str) -> str:
        return f"Email content with label '{label}' already exists for this category and language '{language}'"
