"""
Pydantic schemas for admin registration and login.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, UUID4, field_validator
from sitecms.core.security import MIN_PASSWORD_LENGTH
from sitecms.schemas.common import trim_lower


class UserRegisterRequest(BaseModel):
    """Request schema for user registration."""
    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return trim_lower(v)


class UserLoginRequest(BaseModel):
    """
    Request schema for login. The email is only normalized, not validated,
    so a malformed address fails like any unknown account.
    """
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return trim_lower(v)


class UserPublic(BaseModel):
    """User profile response (no sensitive data)."""
    id: UUID4
    email: str

    model_config = ConfigDict(from_attributes=True)


class UserAuthResponse(BaseModel):
    message: str
    user: UserPublic
