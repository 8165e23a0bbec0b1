from typing import ClassVar, FrozenSet, Optional
from pydantic import BaseModel
from sitecms.schemas.common import NonEmptyStr, PartialUpdate, RecordResponse


class TeamMemberCreateRequest(BaseModel):
    name: NonEmptyStr
    role: NonEmptyStr
    bio: NonEmptyStr
    image: Optional[str] = None
    order: int = 0


class TeamMemberUpdateRequest(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"image"})

    name: Optional[NonEmptyStr] = None
    role: Optional[NonEmptyStr] = None
    bio: Optional[NonEmptyStr] = None
    image: Optional[str] = None
    order: Optional[int] = None


class TeamMemberResponse(RecordResponse):
    name: str
    role: str
    bio: str
    image: Optional[str] = None
    order: int
