"""
Email content endpoints
"""
from fastapi import APIRouter, Depends, Response
from typing import List, Optional
from constants import HTTPStatus, PageLanguage, ServerConfig
from dependencies import get_current_user, get_email_content_service
from dtos.request import EmailContentCreateRequest, EmailContentUpdateRequest
from dtos.response import EmailContentResponse
from services.email_content_service import EmailContentService
from utils.error_handlers import handle_api_errors

router = APIRouter(
    prefix=f"{ServerConfig.CMS_PREFIX}/email-contents",
    tags=["email-contents"],
    dependencies=[Depends(get_current_user)],
)


@router.post("", response_model=EmailContentResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create email content")
def create_email_content(
    request: EmailContentCreateRequest,
    service: EmailContentService = Depends(get_email_content_service)
):
    """
    Create an email content for a category.

    (email_category_id, language, label) must be unique.
    """
    return service.create_content(request)


@router.get("", response_model=List[EmailContentResponse])
@handle_api_errors("List email contents")
def list_email_contents(
    email_category_id: Optional[str] = None,
    language: Optional[PageLanguage] = None,
    label: Optional[str] = None,
    service: EmailContentService = Depends(get_email_content_service)
):
    """List email contents with optional filters"""
    return service.list_contents(email_category_id=email_category_id, language=language, label=label)


@router.get("/category/{email_category_id}/language/{language}", response_model=List[EmailContentResponse])
@handle_api_errors("Get email contents by category and language")
def get_email_contents_by_category_and_language(
    email_category_id: str,
    language: PageLanguage,
    service: EmailContentService = Depends(get_email_content_service)
):
    return service.get_contents_by_category_and_language(email_category_id, language)


@router.get("/{content_id}", response_model=EmailContentResponse)
@handle_api_errors("Get email content")
def get_email_content(content_id: str, service: EmailContentService = Depends(get_email_content_service)):
    return service.get_content(content_id)


@router.patch("/{content_id}", response_model=EmailContentResponse)
@handle_api_errors("Update email content")
def update_email_content(
    content_id: str,
    request: EmailContentUpdateRequest,
    service: EmailContentService = Depends(get_email_content_service)
):
    """Partially update an email content"""
    return service.update_content(content_id, request)


@router.delete("/{content_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete email content")
def delete_email_content(content_id: str, service: EmailContentService = Depends(get_email_content_service)):
    service.delete_content(content_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
