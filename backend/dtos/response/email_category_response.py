"""
Email Category Response DTOs
"""

from pydantic import BaseModel, ConfigDict
from datetime import datetime


class EmailCategoryResponse(BaseModel):
    id: str
    title: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
