"""
Form Service

Business rules of the form builder. A form is handled as one aggregate:
the form row, its sections and their fields are created, replaced and
returned together.

Update strategy: the stored sections (and, through the cascade, their fields)
are deleted and the sections from the request are inserted in their place,
inside the same transaction as the form's own changes. Field IDs therefore
change on every update; field_key is the stable identifier.
"""

import math
from datetime import date, datetime
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
import logging

from constants import FormSort, PaginationConfig
from dtos.request import FormRequest
from exceptions import ConflictError, NotFoundError, ValidationError
from models import Form, FormField, FormSection
from repositories.email_category_repository import EmailCategoryRepository
from repositories.form_repository import FormRepository
from services.interfaces import IFormService
from services.transaction import unit_of_work
from utils.logging_utils import log_operation
from utils.text_helpers import slugify
from utils.uuid_helper import generate_uuid, parse_uuid

logger = logging.getLogger(__name__)


class FormService(IFormService):
    """Service for form builder business logic."""

    def __init__(self, db: Session):
        """
        Initialize FormService.

        Args:
            db: Database session
        """
        self.db = db
        self.form_repo = FormRepository(db)
        self.category_repo = EmailCategoryRepository(db)

    def get_form(self, form_id: str) -> Form:
        """
        Get the full form aggregate.

        Raises:
            ValidationError: If form_id is not a UUID
            NotFoundError: If no such form exists
        """
        form_id = parse_uuid(form_id, "form id")
        form = self.form_repo.get_with_structure(form_id)
        if not form:
            raise NotFoundError("Form", form_id)
        return form

    def get_form_structure(self, form_id: str) -> Form:
        """Public view of a form; same aggregate, serialized without CMS metadata."""
        return self.get_form(form_id)

    def list_forms(
        self,
        name: Optional[str] = None,
        created_at: Optional[date] = None,
        page: int = PaginationConfig.DEFAULT_PAGE,
        items_per_page: int = PaginationConfig.DEFAULT_ITEMS_PER_PAGE,
        sort: FormSort = FormSort.UPDATED_AT_DESC
    ) -> Dict[str, Any]:
        """
        List forms with filtering, sorting and pagination.

        Returns:
            Dictionary containing:
                - data: Forms on the requested page
                - meta: total_items, items_per_page, current_page, total_pages
        """
        if page < 1:
            raise ValidationError("page must be at least 1", invalid_fields={"page": page})
        if not 1 <= items_per_page <= PaginationConfig.MAX_ITEMS_PER_PAGE:
            raise ValidationError(
                f"items_per_page must be between 1 and {PaginationConfig.MAX_ITEMS_PER_PAGE}",
                invalid_fields={"items_per_page": items_per_page}
            )

        name = name.strip() if name else None
        forms, total = self.form_repo.list_page(name, created_at, sort, page, items_per_page)

        return {
            "data": forms,
            "meta": {
                "total_items": total,
                "items_per_page": items_per_page,
                "current_page": page,
                "total_pages": math.ceil(total / items_per_page) if total else 0,
            },
        }

    @log_operation("create_form")
    def create_form(self, request: FormRequest) -> Form:
        """
        Create a form with its sections and fields in one transaction.

        Raises:
            ValidationError: On duplicate field keys or an unknown email category
            ConflictError: If another form already uses the generated slug
        """
        self._check_unique_field_keys(request)
        self._check_email_category(request.email_category_id)
        slug = self._resolve_slug(request.name)

        form = Form(
            name=request.name,
            slug=slug,
            description=request.description,
            email_category_id=request.email_category_id,
            language=request.language.value if request.language else None,
        )
        form.sections = self._build_sections(request)

        with unit_of_work(self.db, "create_form", f"A form with slug '{slug}' already exists"):
            self.form_repo.create(form)

        logger.info(f"Created form {form.id} ('{form.slug}') with {len(request.sections)} section(s)")
        return self.get_form(form.id)

    @log_operation("update_form")
    def update_form(self, form_id: str, request: FormRequest) -> Form:
        """
        Replace a form's attributes, sections and fields.

        Inside one transaction: delete the existing sections (fields go with
        them), update the form row, insert the new sections and fields. On any
        error the transaction is rolled back and the stored form is unchanged.
        The form is re-read after commit so the caller gets the stored state.

        Raises:
            ValidationError: On duplicate field keys or an unknown email category
            NotFoundError: If no such form exists
            ConflictError: If the new slug belongs to another form
        """
        self._check_unique_field_keys(request)
        form = self.get_form(form_id)
        self._check_email_category(request.email_category_id)
        slug = self._resolve_slug(request.name, current=form)

        with unit_of_work(self.db, "update_form", f"A form with slug '{slug}' already exists"):
            form.name = request.name
            form.slug = slug
            form.description = request.description
            form.email_category_id = request.email_category_id
            if request.language is not None:
                form.language = request.language.value
            form.updated_at = datetime.utcnow()

            self.form_repo.replace_sections(form, self._build_sections(request))

        logger.info(f"Updated form {form.id}: {len(request.sections)} section(s), {len(request.field_keys())} field(s)")
        return self.get_form(form.id)

    @log_operation("delete_form")
    def delete_form(self, form_id: str) -> None:
        """
        Hard-delete a form and its structure.

        Raises:
            NotFoundError: If no such form exists
            ConflictError: If the form has submissions
        """
        form = self.get_form(form_id)
        message = "Cannot delete form: it has existing submissions."
        if self.form_repo.has_submissions(form.id):
            raise ConflictError(message)

        with unit_of_work(self.db, "delete_form", message):
            self.form_repo.delete(form)

    @staticmethod
    def _check_unique_field_keys(request: FormRequest) -> None:
        seen = set()
        for key in request.field_keys():
            if key in seen:
                raise ValidationError(
                    f"Duplicate field_key '{key}' found in request",
                    invalid_fields={"field_key": key}
                )
            seen.add(key)

    def _check_email_category(self, email_category_id: Optional[str]) -> None:
        if email_category_id and not self.category_repo.exists(email_category_id):
            raise ValidationError(
                f"email_category_id '{email_category_id}' not found",
                invalid_fields={"email_category_id": email_category_id}
            )

    def _resolve_slug(self, name: str, current: Optional[Form] = None) -> str:
        """
        Slug for a form name, unique across forms.

        Names with no sluggable characters keep the current slug on update and
        get a random one on create.
        """
        slug = slugify(name)
        if not slug:
            slug = current.slug if current else f"form-{generate_uuid()[:8]}"

        exclude_id = current.id if current else None
        if self.form_repo.get_by_slug(slug, exclude_id=exclude_id):
            raise ConflictError(f"A form with slug '{slug}' already exists", field="slug")
        return slug

    @staticmethod
    def _build_sections(request: FormRequest) -> List[FormSection]:
        # order_index follows list position (1-based); values sent by the client are ignored
        sections = []
        for section_pos, section_req in enumerate(request.sections, start=1):
            section = FormSection(
                title=section_req.title,
                description=section_req.description,
                order_index=section_pos,
            )
            section.fields = [
                FormField(
                    label=field_req.label,
                    field_key=field_req.field_key,
                    field_type=field_req.field_type.value,
                    placeholder=field_req.placeholder,
                    is_required=field_req.is_required,
                    default_value=field_req.default_value,
                    properties=field_req.properties,
                    display=field_req.display,
                    order_index=field_pos,
                )
                for field_pos, field_req in enumerate(section_req.fields, start=1)
            ]
            sections.append(section)
        return sections
