"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.
"""

from .auth_request import RegisterRequest, LoginRequest
from .email_category_request import EmailCategoryCreateRequest, EmailCategoryUpdateRequest
from .email_content_request import EmailContentCreateRequest, EmailContentUpdateRequest
from .form_request import FormRequest, FormSectionRequest, FormFieldRequest
from .form_submission_request import FormSubmissionCreateRequest

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "EmailCategoryCreateRequest",
    "EmailCategoryUpdateRequest",
    "EmailContentCreateRequest",
    "EmailContentUpdateRequest",
    "FormRequest",
    "FormSectionRequest",
    "FormFieldRequest",
    "FormSubmissionCreateRequest",
]
