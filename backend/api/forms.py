"""
Form builder endpoints
"""
from datetime import date
from fastapi import APIRouter, Depends, Query, Response
from typing import Optional
from constants import FormSort, HTTPStatus, PaginationConfig, ServerConfig
from dependencies import get_current_user, get_form_service
from dtos.request import FormRequest
from dtos.response import FormResponse, FormListItemResponse, PaginatedFormListResponse, PaginationMeta
from services.interfaces import IFormService
from utils.error_handlers import handle_api_errors

router = APIRouter(
    prefix=f"{ServerConfig.CMS_PREFIX}/forms",
    tags=["forms"],
    dependencies=[Depends(get_current_user)],
)


@router.post("", response_model=FormResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create form")
def create_form(request: FormRequest, service: IFormService = Depends(get_form_service)):
    """
    Create a form with its sections and fields.

    Sections and fields are ordered as sent; field_key must be unique across
    the whole form and email_category_id, when given, must exist.
    """
    return service.create_form(request)


@router.get("", response_model=PaginatedFormListResponse)
@handle_api_errors("List forms")
def list_forms(
    name: Optional[str] = Query(None, max_length=255, description="Case-insensitive name filter"),
    created_at: Optional[date] = Query(None, description="Creation day, YYYY-MM-DD"),
    page: int = Query(PaginationConfig.DEFAULT_PAGE, ge=1),
    items_per_page: int = Query(PaginationConfig.DEFAULT_ITEMS_PER_PAGE, ge=1, le=PaginationConfig.MAX_ITEMS_PER_PAGE),
    sort: FormSort = Query(FormSort.UPDATED_AT_DESC),
    service: IFormService = Depends(get_form_service)
):
    """List forms with filtering, sorting and pagination"""
    result = service.list_forms(
        name=name,
        created_at=created_at,
        page=page,
        items_per_page=items_per_page,
        sort=sort,
    )
    return PaginatedFormListResponse(
        data=[FormListItemResponse.model_validate(form) for form in result["data"]],
        meta=PaginationMeta(**result["meta"]),
    )


@router.get("/{form_id}", response_model=FormResponse)
@handle_api_errors("Get form")
def get_form(form_id: str, service: IFormService = Depends(get_form_service)):
    return service.get_form(form_id)


@router.put("/{form_id}", response_model=FormResponse)
@handle_api_errors("Update form")
def update_form(form_id: str, request: FormRequest, service: IFormService = Depends(get_form_service)):
    """
    Replace a form, its sections and fields.

    The stored sections are swapped for the ones in the body atomically; on
    any error the form is left as it was.
    """
    return service.update_form(form_id, request)


@router.delete("/{form_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete form")
def delete_form(form_id: str, service: IFormService = Depends(get_form_service)):
    """
    Delete a form.

    Raises:
        HTTPException: 409 if the form has submissions
    """
    service.delete_form(form_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
