"""
Form Request DTOs

DTOs for the form builder. A form request carries the whole aggregate:
the form's own attributes plus every section and field, in display order.
"""

import re
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Optional

from constants import FieldLimits, FormFieldType, PageLanguage
from utils.uuid_helper import canonical_uuid

FIELD_KEY_PATTERN = re.compile(r'^[A-Za-z0-9_\-]+$')


class FormFieldRequest(BaseModel):
    """One input of a form section."""

    label: str = Field(min_length=1, max_length=FieldLimits.LABEL_MAX, description="Label shown to the user")
    field_key: str = Field(min_length=1, max_length=FieldLimits.FIELD_KEY_MAX,
                           description="Key used in submitted data, unique within the form")
    field_type: FormFieldType = Field(description="Input type")
    is_required: bool = Field(False, description="Whether a value must be submitted")
    placeholder: Optional[str] = Field(None, max_length=FieldLimits.PLACEHOLDER_MAX)
    default_value: Optional[str] = Field(None, max_length=FieldLimits.DEFAULT_VALUE_MAX)
    order_index: int = Field(0, ge=0, description="Ignored on write, position in the list wins")
    properties: Optional[Dict[str, Any]] = Field(None, description="Type specific options, e.g. dropdown choices")
    display: Optional[Dict[str, Any]] = Field(None, description="Layout hints for the renderer")

    @field_validator("field_key")
    @classmethod
    def validate_field_key(cls, v):
        """Field keys become JSON keys of submissions: letters, digits, '_' and '-' only."""
        if not FIELD_KEY_PATTERN.match(v):
            raise ValueError("field_key may only contain letters, digits, '_' and '-'")
        return v


class FormSectionRequest(BaseModel):
    """A titled group of fields."""

    title: Optional[str] = Field(None, max_length=FieldLimits.NAME_MAX)
    description: Optional[str] = Field(None, max_length=FieldLimits.DESCRIPTION_MAX)
    order_index: int = Field(0, ge=0, description="Ignored on write, position in the list wins")
    fields: List[FormFieldRequest] = Field(default_factory=list)


class FormRequest(BaseModel):
    """
    Request DTO for creating or replacing a form.

    PUT uses the same shape: sections and fields in the body replace the
    stored ones entirely.
    """

    name: str = Field(min_length=1, max_length=FieldLimits.NAME_MAX, description="Form name, also the slug source")
    description: Optional[str] = Field(None, max_length=FieldLimits.DESCRIPTION_MAX)
    email_category_id: Optional[str] = Field(None, description="Email category used for submission notifications")
    language: Optional[PageLanguage] = Field(None, description="Form language; kept unchanged on update when omitted")
    sections: List[FormSectionRequest] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("name must not be blank")
        return v.strip()

    @field_validator("email_category_id")
    @classmethod
    def validate_email_category_id(cls, v):
        if v is None or v == "":
            return None
        return canonical_uuid(v)

    def field_keys(self) -> List[str]:
        """All field keys in request order, across sections."""
        return [field.field_key for section in self.sections for field in section.fields]

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "name": "Contact Us",
            "description": "General enquiries",
            "language": "en",
            "sections": [
                {
                    "title": "About you",
                    "order_index": 1,
                    "fields": [
                        {"label": "Full name", "field_key": "full_name", "field_type": "text",
                         "is_required": True, "order_index": 1},
                        {"label": "Email", "field_key": "email", "field_type": "email",
                         "is_required": True, "order_index": 2}
                    ]
                }
            ]
        }
    })
