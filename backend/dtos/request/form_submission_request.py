"""
Form Submission Request DTOs
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Any, Dict, Optional


class FormSubmissionCreateRequest(BaseModel):
    """Request DTO for submitting a form."""

    submitted_data: Dict[str, Any] = Field(description="Values keyed by field_key")
    submitted_email: Optional[EmailStr] = Field(None, description="Submitter address for confirmation emails")
