"""
Public form endpoints used by the website (no authentication)
"""
from fastapi import APIRouter, Depends
from constants import HTTPStatus, ServerConfig
from dependencies import get_form_service, get_form_submission_service
from dtos.request import FormSubmissionCreateRequest
from dtos.response import FormStructureResponse, FormSubmissionItemResponse, FormSubmissionResponse
from services.interfaces import IFormService, IFormSubmissionService
from utils.error_handlers import handle_api_errors

router = APIRouter(prefix=f"{ServerConfig.APP_PREFIX}/forms", tags=["app-forms"])


@router.get("/{form_id}/structure", response_model=FormStructureResponse)
@handle_api_errors("Get form structure")
def get_form_structure(form_id: str, service: IFormService = Depends(get_form_service)):
    """Sections and fields needed to render a form"""
    return service.get_form_structure(form_id)


@router.post("/{form_id}/submissions", response_model=FormSubmissionItemResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Submit form")
def submit_form(
    form_id: str,
    request: FormSubmissionCreateRequest,
    service: IFormSubmissionService = Depends(get_form_submission_service)
):
    submission = service.create_submission(form_id, request)
    return FormSubmissionItemResponse(
        message="successfully created the formSubmission",
        item=FormSubmissionResponse.model_validate(submission),
    )
