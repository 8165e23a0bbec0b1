from typing import Optional
from pydantic import BaseModel
from sitecms.schemas.common import NonEmptyStr, PartialUpdate, RecordResponse


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    title: NonEmptyStr
    location: NonEmptyStr
    description: NonEmptyStr


class JobUpdateRequest(PartialUpdate):
    title: Optional[NonEmptyStr] = None
    location: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None


class JobResponse(RecordResponse):
    title: str
    location: str
    description: str
