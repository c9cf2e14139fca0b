"""
Form Response DTOs

DTOs for the form aggregate, the CMS form list and the public form structure.
"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Any, Dict, List, Optional


class FormFieldResponse(BaseModel):
    id: str
    label: str
    field_key: str
    field_type: str
    is_required: bool
    placeholder: Optional[str] = None
    default_value: Optional[str] = None
    order_index: int
    properties: Optional[Dict[str, Any]] = None
    display: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(from_attributes=True)


class FormSectionResponse(BaseModel):
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    order_index: int
    fields: List[FormFieldResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class FormResponse(BaseModel):
    """
    Response DTO for the full form aggregate.

    Returned by create, get and update. Sections and fields are ordered by
    order_index.
    """

    id: str
    name: str
    slug: str
    description: Optional[str] = None
    email_category_id: Optional[str] = None
    language: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    sections: List[FormSectionResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class FormStructureResponse(BaseModel):
    """Public form structure used by the site to render a form. No CMS metadata."""

    id: str
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    sections: List[FormSectionResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class FormListItemResponse(BaseModel):
    id: str
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PaginationMeta(BaseModel):
    total_items: int = Field(description="Rows matching the filters")
    items_per_page: int
    current_page: int
    total_pages: int = Field(description="ceil(total_items / items_per_page)")


class PaginatedFormListResponse(BaseModel):
    data: List[FormListItemResponse]
    meta: PaginationMeta
