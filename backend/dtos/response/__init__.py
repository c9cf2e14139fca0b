"""
Response DTOs

DTOs for outgoing API responses. These decouple the API from database models
and provide a clear contract for what data the API returns.
"""

from .auth_response import UserResponse, RegisterResponse, LoginResponse
from .email_category_response import EmailCategoryResponse
from .email_content_response import EmailContentResponse
from .form_response import (
    FormFieldResponse,
    FormSectionResponse,
    FormResponse,
    FormStructureResponse,
    FormListItemResponse,
    PaginationMeta,
    PaginatedFormListResponse,
)
from .form_submission_response import (
    FormSubmissionResponse,
    FormSubmissionItemResponse,
    FormSubmissionListResponse,
)

__all__ = [
    "UserResponse",
    "RegisterResponse",
    "LoginResponse",
    "EmailCategoryResponse",
    "EmailContentResponse",
    "FormFieldResponse",
    "FormSectionResponse",
    "FormResponse",
    "FormStructureResponse",
    "FormListItemResponse",
    "PaginationMeta",
    "PaginatedFormListResponse",
    "FormSubmissionResponse",
    "FormSubmissionItemResponse",
    "FormSubmissionListResponse",
]
