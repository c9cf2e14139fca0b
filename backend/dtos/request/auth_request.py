"""
Auth Request DTOs

DTOs for registration and login requests.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from constants import AuthConfig


class RegisterRequest(BaseModel):
    """Request DTO for creating a CMS account."""

    email: EmailStr = Field(description="Login email, stored lowercase")
    password: str = Field(min_length=AuthConfig.MIN_PASSWORD_LENGTH, max_length=72,
                          description="Plain password, hashed before storage")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        """Emails are compared case-insensitively."""
        return v.strip().lower()

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "email": "editor@example.com",
            "password": "s3cret-pass"
        }
    })


class LoginRequest(BaseModel):
    """
    Request DTO for logging in.

    Fields default to empty so the service can answer a missing email or
    password with a 400 instead of a schema error.
    """

    email: str = Field("", description="Account email")
    password: str = Field("", description="Account password")
