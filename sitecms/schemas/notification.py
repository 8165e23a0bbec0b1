from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from sitecms.schemas.common import OneLineNonEmptyStr, OneLineStr, trim_lower


class ContactSubmission(BaseModel):
    """Contact form fields; camelCase names as posted by the site frontend."""
    model_config = ConfigDict(populate_by_name=True)

    name: OneLineNonEmptyStr
    email: EmailStr
    business_name: Optional[str] = Field(None, alias="businessName")
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    how_can_we_help: Optional[str] = Field(None, alias="howCanWeHelp")
    best_time_to_contact: Optional[str] = Field(None, alias="bestTimeToContact")
    message: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return trim_lower(v)


class JobApplication(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: OneLineNonEmptyStr
    email: EmailStr
    phone: Optional[str] = None
    job_title: Optional[OneLineStr] = Field(None, alias="jobTitle")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return trim_lower(v)


class NotificationResponse(BaseModel):
    message: str
    messageId: Optional[str] = None
