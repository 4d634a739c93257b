from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ._strict_base import RequestModel, StrictModel


class AnnouncementCreate(RequestModel):
    title: Optional[str] = None
    content: Optional[str] = None


class AnnouncementUpdate(AnnouncementCreate):
    pass


class AnnouncementResponse(StrictModel):
    id: str
    title: str
    content: str
    created_by: str = Field(alias="createdBy")
    created_at: datetime = Field(alias="createdAt")


class AnnouncementListResponse(StrictModel):
    announcements: List[AnnouncementResponse]
