from typing import ClassVar, FrozenSet, Optional
from pydantic import BaseModel
from sitecms.models.image import ImageCategory
from sitecms.schemas.common import NonEmptyStr, PartialUpdate, RecordResponse


class ImageCreateRequest(BaseModel):
    """Schema for registering an image (uploaded or externally hosted)"""
    category: ImageCategory
    src: NonEmptyStr
    alt: Optional[str] = ""


class ImageUpdateRequest(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"alt"})

    category: Optional[ImageCategory] = None
    src: Optional[NonEmptyStr] = None
    alt: Optional[str] = None


class ImageResponse(RecordResponse):
    category: str
    src: str
    alt: str


class UploadResponse(BaseModel):
    url: str
    filename: str
    id: str
    category: str
