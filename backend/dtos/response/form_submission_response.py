"""
Form Submission Response DTOs

The envelopes (message/item, message/totalCount/...) match what the CMS
frontend already consumes, hence the camelCase totalCount.
"""

from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Any, Dict, List, Optional


class FormSubmissionResponse(BaseModel):
    id: str
    form_id: str
    submitted_data: Dict[str, Any]
    submitted_at: datetime
    submitted_email: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FormSubmissionItemResponse(BaseModel):
    message: str
    item: FormSubmissionResponse


class FormSubmissionListResponse(BaseModel):
    message: str
    totalCount: int
    page: int
    limit: int
    items: List[FormSubmissionResponse]
