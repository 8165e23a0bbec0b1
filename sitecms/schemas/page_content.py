from typing import Any, Dict, Optional
from pydantic import BaseModel, field_validator


class PageContentSaveRequest(BaseModel):
    """
    Body for saving a page. content replaces whatever was stored before.
    """
    content: Dict[str, Any]
    last_updated_by: Optional[str] = None

    @field_validator("content")
    @classmethod
    def content_not_empty(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        if not v:
            raise ValueError("Content is required")
        return v
