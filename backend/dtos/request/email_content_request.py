"""
Email Content Request DTOs

DTOs for creating and updating the email templates attached to a category.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Literal, Optional, Union
from urllib.parse import urlparse

from constants import FieldLimits, PageLanguage
from utils.uuid_helper import canonical_uuid


def _validate_link(v: Optional[str]) -> Optional[str]:
    if not v:
        return v
    parsed = urlparse(v)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("must be an absolute http(s) URL")
    return v


class EmailContentCreateRequest(BaseModel):
    """Request DTO for creating an email content."""

    email_category_id: str = Field(description="Owning email category ID")
    language: PageLanguage = Field(description="Content language")
    label: str = Field(min_length=FieldLimits.EMAIL_LABEL_MIN, max_length=FieldLimits.EMAIL_LABEL_MAX,
                       description="Label, unique per category and language")
    send_to: Union[EmailStr, Literal[""]] = Field("", description="Recipient address for admin notifications")
    cc_email: Union[EmailStr, Literal[""]] = Field("", description="CC address")
    bcc_email: Union[EmailStr, Literal[""]] = Field("", description="BCC address")
    send_from_email: EmailStr = Field(description="Sender address")
    send_from_name: str = Field("", max_length=FieldLimits.SEND_FROM_NAME_MAX, description="Sender display name")
    subject: str = Field(min_length=1, max_length=FieldLimits.SUBJECT_MAX, description="Email subject")
    top_img_link: str = Field("", max_length=FieldLimits.LINK_MAX, description="Header image URL")
    header: str = Field("", description="Header text")
    paragraph: str = Field("", description="Body text")
    footer: str = Field("", description="Footer text")
    footer_image_link: str = Field("", max_length=FieldLimits.LINK_MAX, description="Footer image URL")

    @field_validator("email_category_id")
    @classmethod
    def validate_category_id(cls, v):
        """Category ID must be a UUID."""
        return canonical_uuid(v)

    @field_validator("top_img_link", "footer_image_link")
    @classmethod
    def validate_links(cls, v):
        return _validate_link(v)


class EmailContentUpdateRequest(BaseModel):
    """Request DTO for a partial email content update. Only provided fields change."""

    language: Optional[PageLanguage] = None
    label: Optional[str] = Field(None, min_length=FieldLimits.EMAIL_LABEL_MIN, max_length=FieldLimits.EMAIL_LABEL_MAX)
    send_to: Optional[Union[EmailStr, Literal[""]]] = None
    cc_email: Optional[Union[EmailStr, Literal[""]]] = None
    bcc_email: Optional[Union[EmailStr, Literal[""]]] = None
    send_from_email: Optional[EmailStr] = None
    send_from_name: Optional[str] = Field(None, max_length=FieldLimits.SEND_FROM_NAME_MAX)
    subject: Optional[str] = Field(None, min_length=1, max_length=FieldLimits.SUBJECT_MAX)
    top_img_link: Optional[str] = Field(None, max_length=FieldLimits.LINK_MAX)
    header: Optional[str] = None
    paragraph: Optional[str] = None
    footer: Optional[str] = None
    footer_image_link: Optional[str] = Field(None, max_length=FieldLimits.LINK_MAX)

    @field_validator("top_img_link", "footer_image_link")
    @classmethod
    def validate_links(cls, v):
        return _validate_link(v)
