"""
Email category endpoints
"""
from fastapi import APIRouter, Depends, Response
from typing import List
from constants import HTTPStatus, ServerConfig
from dependencies import get_current_user, get_email_category_service
from dtos.request import EmailCategoryCreateRequest, EmailCategoryUpdateRequest
from dtos.response import EmailCategoryResponse
from services.email_category_service import EmailCategoryService
from utils.error_handlers import handle_api_errors

router = APIRouter(
    prefix=f"{ServerConfig.CMS_PREFIX}/email-categories",
    tags=["email-categories"],
    dependencies=[Depends(get_current_user)],
)


@router.post("", response_model=EmailCategoryResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create email category")
def create_email_category(
    request: EmailCategoryCreateRequest,
    service: EmailCategoryService = Depends(get_email_category_service)
):
    """Create a category. Titles are unique (409 on duplicate)."""
    return service.create_category(request)


@router.get("", response_model=List[EmailCategoryResponse])
@handle_api_errors("List email categories")
def list_email_categories(service: EmailCategoryService = Depends(get_email_category_service)):
    """List all categories, newest first"""
    return service.list_categories()


@router.get("/{category_id}", response_model=EmailCategoryResponse)
@handle_api_errors("Get email category")
def get_email_category(category_id: str, service: EmailCategoryService = Depends(get_email_category_service)):
    return service.get_category(category_id)


@router.patch("/{category_id}", response_model=EmailCategoryResponse)
@handle_api_errors("Update email category")
def update_email_category(
    category_id: str,
    request: EmailCategoryUpdateRequest,
    service: EmailCategoryService = Depends(get_email_category_service)
):
    """Rename a category"""
    return service.update_category(category_id, request)


@router.delete("/{category_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete email category")
def delete_email_category(category_id: str, service: EmailCategoryService = Depends(get_email_category_service)):
    """
    Delete a category and its email contents.

    Raises:
        HTTPException: 409 if a form still uses the category
    """
    service.delete_category(category_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
