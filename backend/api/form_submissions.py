"""
Form submission endpoints (CMS)
"""
from fastapi import APIRouter, Depends, Query
from typing import Optional
from constants import HTTPStatus, PaginationConfig, ServerConfig
from dependencies import get_current_user, get_form_submission_service
from dtos.request import FormSubmissionCreateRequest
from dtos.response import FormSubmissionItemResponse, FormSubmissionListResponse, FormSubmissionResponse
from services.interfaces import IFormSubmissionService
from utils.error_handlers import handle_api_errors

router = APIRouter(
    prefix=f"{ServerConfig.CMS_PREFIX}/forms",
    tags=["form-submissions"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/submissions/{submission_id}", response_model=FormSubmissionItemResponse)
@handle_api_errors("Get form submission")
def get_form_submission(
    submission_id: str,
    service: IFormSubmissionService = Depends(get_form_submission_service)
):
    submission = service.get_submission(submission_id)
    return FormSubmissionItemResponse(
        message="successfully got the formSubmission",
        item=FormSubmissionResponse.model_validate(submission),
    )


@router.post("/{form_id}/submissions", response_model=FormSubmissionItemResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create form submission")
def create_form_submission(
    form_id: str,
    request: FormSubmissionCreateRequest,
    service: IFormSubmissionService = Depends(get_form_submission_service)
):
    submission = service.create_submission(form_id, request)
    return FormSubmissionItemResponse(
        message="successfully created the formSubmission",
        item=FormSubmissionResponse.model_validate(submission),
    )


@router.get("/{form_id}/submissions", response_model=FormSubmissionListResponse)
@handle_api_errors("List form submissions")
def list_form_submissions(
    form_id: str,
    sort: Optional[str] = Query(None, description="column:asc|desc, e.g. submitted_at:desc"),
    page: int = Query(PaginationConfig.DEFAULT_PAGE, ge=1),
    limit: int = Query(PaginationConfig.DEFAULT_ITEMS_PER_PAGE, ge=1, le=PaginationConfig.MAX_ITEMS_PER_PAGE),
    service: IFormSubmissionService = Depends(get_form_submission_service)
):
    """
    List a form's submissions.

    Sortable columns: created_at, submitted_at, submitted_email. Default is
    created_at descending.
    """
    submissions, total = service.list_submissions(form_id, sort=sort, page=page, limit=limit)
    return FormSubmissionListResponse(
        message="successfully got the formSubmissions",
        totalCount=total,
        page=page,
        limit=limit,
        items=[FormSubmissionResponse.model_validate(s) for s in submissions],
    )
