from typing import Optional
from pydantic import BaseModel
from sitecms.schemas.common import NonEmptyStr, PartialUpdate, RecordResponse


class ServiceCreateRequest(BaseModel):
    title: NonEmptyStr
    description: NonEmptyStr


class ServiceUpdateRequest(PartialUpdate):
    title: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None


class ServiceResponse(RecordResponse):
    title: str
    description: str
