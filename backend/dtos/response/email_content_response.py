"""
Email Content Response DTOs
"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional

from .email_category_response import EmailCategoryResponse


class EmailContentResponse(BaseModel):
    """Email content with its category embedded for display."""

    id: str
    email_category_id: str
    email_category: Optional[EmailCategoryResponse] = Field(None, description="Owning category")
    language: str
    label: str
    send_to: str
    cc_email: str
    bcc_email: str
    send_from_email: str
    send_from_name: str
    subject: str
    top_img_link: str
    header: str
    paragraph: str
    footer: str
    footer_image_link: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
