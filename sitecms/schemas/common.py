"""
Shared Pydantic building blocks for request/response schemas.
"""

from datetime import datetime
from typing import Annotated, ClassVar, FrozenSet
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, EmailStr, StringConstraints, TypeAdapter, model_validator

# Required text field: present, and not empty once surrounding whitespace is stripped
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def collapse_whitespace(value):
    return " ".join(value.split()) if isinstance(value, str) else value


# Text that ends up in mail headers (names, subjects): line breaks become spaces
OneLineStr = Annotated[str, BeforeValidator(collapse_whitespace)]
OneLineNonEmptyStr = Annotated[str, BeforeValidator(collapse_whitespace), StringConstraints(min_length=1)]


def trim_lower(value):
    return value.strip().lower() if isinstance(value, str) else value


# Stored addresses are trimmed and lowercased before EmailStr checks them
NormalizedEmail = Annotated[EmailStr, BeforeValidator(trim_lower)]

_email_adapter = TypeAdapter(NormalizedEmail)


def normalize_email(value: str) -> str:
    """Normalize and validate an address outside a request model (scripts)."""
    return _email_adapter.validate_python(value)


class PartialUpdate(BaseModel):
    """
    Base for PUT bodies: every field optional, but a field that is sent
    must still be valid. Sending null for a required field is rejected.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for field in self.model_fields_set:
            if getattr(self, field) is None and field not in self.nullable_fields:
                raise ValueError(f"{field} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class RecordResponse(BaseModel):
    """Fields every stored record carries."""
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)  # Allows conversion from SQLAlchemy models


class DeleteResponse(BaseModel):
    message: str
    id: UUID
