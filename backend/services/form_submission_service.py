"""
Form Submission Service

Stores submissions and works out which notification emails each one triggers.

Notification rules (per email content of the form's email category):
- a label containing "user" is a confirmation to the submitter and goes to
  submitted_email; skipped when the submission has no email
- any other label is an admin notification to send_to, cc_email and
  bcc_email; skipped when all three are empty

Delivery is not done here: the plan is logged for an outbound mailer to pick up.
"""

from datetime import datetime
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
import logging

from constants import PaginationConfig, SubmissionConfig
from dtos.internal.notification_dto import EmailNotification, NotificationPlan
from dtos.request import FormSubmissionCreateRequest
from exceptions import NotFoundError, ValidationError
from models import Form, FormSubmission
from repositories.email_content_repository import EmailContentRepository
from repositories.form_repository import FormRepository
from repositories.form_submission_repository import FormSubmissionRepository
from services.interfaces import IFormSubmissionService
from services.transaction import unit_of_work
from utils.logging_utils import log_operation
from utils.uuid_helper import parse_uuid

logger = logging.getLogger(__name__)


def parse_sort(sort: Optional[str]) -> Tuple[str, bool]:
    """
    Parse a "column:direction" sort parameter.

    Unknown columns and malformed values fall back to created_at descending;
    an unknown direction falls back to ascending.

    Returns:
        Tuple of (column name, descending)
    """
    default = (SubmissionConfig.DEFAULT_SORT_COLUMN, SubmissionConfig.DEFAULT_SORT_DIRECTION == "desc")
    if not sort:
        return default

    parts = sort.split(":")
    if len(parts) != 2:
        return default

    column, direction = parts[0].strip(), parts[1].strip().lower()
    if column not in SubmissionConfig.SORTABLE_COLUMNS:
        logger.debug(f"Ignoring sort on unsupported column '{column}'")
        return default
    return column, direction == "desc"


class FormSubmissionService(IFormSubmissionService):
    """Service for form submission business logic."""

    def __init__(self, db: Session):
        """
        Initialize FormSubmissionService.

        Args:
            db: Database session
        """
        self.db = db
        self.submission_repo = FormSubmissionRepository(db)
        self.form_repo = FormRepository(db)
        self.content_repo = EmailContentRepository(db)

    @log_operation("create_form_submission")
    def create_submission(self, form_id: str, request: FormSubmissionCreateRequest) -> FormSubmission:
        """
        Store a submission for a form.

        Raises:
            NotFoundError: If the form does not exist
        """
        form = self._get_form(form_id)

        submission = FormSubmission(
            form_id=form.id,
            submitted_data=request.submitted_data,
            submitted_email=request.submitted_email,
            submitted_at=datetime.utcnow(),
        )
        with unit_of_work(self.db, "create_form_submission"):
            self.submission_repo.create(submission)

        self.db.refresh(submission)
        logger.info(f"Submission {submission.id} created for form {form.id}")

        plan = self.plan_notifications(submission, form)
        self._log_plan(plan)
        return submission

    def list_submissions(
        self,
        form_id: str,
        sort: Optional[str] = None,
        page: int = PaginationConfig.DEFAULT_PAGE,
        limit: int = PaginationConfig.DEFAULT_ITEMS_PER_PAGE
    ) -> Tuple[List[FormSubmission], int]:
        """
        Page through the submissions of a form.

        Raises:
            ValidationError: On a page below 1 or a limit outside 1..MAX_ITEMS_PER_PAGE
            NotFoundError: If the form does not exist
        """
        if page < 1:
            raise ValidationError("page must be at least 1", invalid_fields={"page": page})
        if not 1 <= limit <= PaginationConfig.MAX_ITEMS_PER_PAGE:
            raise ValidationError(
                f"limit must be between 1 and {PaginationConfig.MAX_ITEMS_PER_PAGE}",
                invalid_fields={"limit": limit}
            )

        form = self._get_form(form_id)
        column, descending = parse_sort(sort)
        return self.submission_repo.list_for_form(form.id, column, descending, page, limit)

    def get_submission(self, submission_id: str) -> FormSubmission:
        """
        Get one submission.

        Raises:
            NotFoundError: If no such submission exists
        """
        submission_id = parse_uuid(submission_id, "submission id")
        submission = self.submission_repo.get_with_form(submission_id)
        if not submission:
            raise NotFoundError("Form submission", submission_id)
        return submission

    def plan_notifications(self, submission: FormSubmission, form: Form) -> NotificationPlan:
        """
        Work out the emails a submission should trigger.

        Args:
            submission: Stored submission
            form: The submitted form

        Returns:
            NotificationPlan with one EmailNotification per email to send
        """
        plan = NotificationPlan(submission_id=submission.id, email_category_id=form.email_category_id)
        if not form.email_category_id:
            return plan

        for content in self.content_repo.get_for_category(form.email_category_id):
            is_user_email = SubmissionConfig.USER_LABEL_MARKER in content.label.lower()

            if is_user_email:
                if not submission.submitted_email:
                    plan.skipped[content.label] = "submitted_email is empty"
                    continue
                recipients = [submission.submitted_email]
            else:
                recipients = [r for r in (content.send_to, content.cc_email, content.bcc_email) if r]
                if not recipients:
                    plan.skipped[content.label] = "no recipients configured"
                    continue

            plan.emails.append(EmailNotification(
                email_content_id=content.id,
                label=content.label,
                language=content.language,
                subject=content.subject,
                send_from_email=content.send_from_email,
                send_from_name=content.send_from_name,
                recipients=recipients,
                is_user_email=is_user_email,
                data={
                    "submittedData": submission.submitted_data,
                    "header": content.header,
                    "paragraph": content.paragraph,
                    "footer": content.footer,
                    "topImgLink": content.top_img_link,
                    "footerImageLink": content.footer_image_link,
                },
            ))

        return plan

    def _get_form(self, form_id: str) -> Form:
        form_id = parse_uuid(form_id, "form id")
        form = self.form_repo.get_by_id(form_id)
        if not form:
            raise NotFoundError("Form", form_id)
        return form

    @staticmethod
    def _log_plan(plan: NotificationPlan) -> None:
        if not plan.email_category_id:
            logger.info(f"No email for submission {plan.submission_id}: form has no email category")
            return
        for email in plan.emails:
            kind = "user confirmation" if email.is_user_email else "admin notification"
            logger.info(f"Queued {kind} '{email.label}' for submission {plan.submission_id} to {email.recipients}")
        for label, reason in plan.skipped.items():
            logger.info(f"Skipped email '{label}' for submission {plan.submission_id}: {reason}")
