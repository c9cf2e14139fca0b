"""
Auth Response DTOs
"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class UserResponse(BaseModel):
    """Public view of a user. The password hash is never included."""

    id: str = Field(description="User ID")
    email: str = Field(description="Login email")
    provider: str = Field(description="Account provider")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    message: str
    token: str = Field(description="Bearer access token")
    token_type: str = Field("Bearer")
    expires_in: int = Field(description="Token lifetime in seconds")
    user: UserResponse
