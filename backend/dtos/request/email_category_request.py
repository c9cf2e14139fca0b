"""
Email Category Request DTOs
"""

from pydantic import BaseModel, Field
from typing import Optional

from constants import FieldLimits


class EmailCategoryCreateRequest(BaseModel):
    """Request DTO for creating an email category."""

    title: str = Field(min_length=FieldLimits.TITLE_MIN, max_length=FieldLimits.TITLE_MAX,
                       description="Unique category title")


class EmailCategoryUpdateRequest(BaseModel):
    """Request DTO for renaming an email category. Omitted title leaves it unchanged."""

    title: Optional[str] = Field(None, min_length=FieldLimits.TITLE_MIN, max_length=FieldLimits.TITLE_MAX,
                                 description="New category title")
