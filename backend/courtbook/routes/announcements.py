# backend/courtbook/routes/announcements.py
"""
Announcement routes

Endpoints:
    GET /announcements                      → List announcements (public, ``title`` filter)
    POST /announcements                     → Add an announcement (author from the session)
    PUT /announcements/{announcement_id}    → Update title and/or content
    DELETE /announcements/{announcement_id} → Delete an announcement
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status

from ..auth import get_current_user
from ..schemas.announcement import (
    AnnouncementCreate,
    AnnouncementListResponse,
    AnnouncementResponse,
    AnnouncementUpdate,
)
from ..schemas.common import DeletedResponse
from ..services.announcement_service import AnnouncementService
from ..services.dependencies import get_announcement_service

router = APIRouter(prefix="/announcements", tags=["announcements"])


@router.get("", response_model=AnnouncementListResponse)
def list_announcements(
    title: Optional[str] = Query(default=None),
    announcement_service: AnnouncementService = Depends(get_announcement_service),
) -> AnnouncementListResponse:
    announcements = announcement_service.list_announcements(title)
    return AnnouncementListResponse(
        announcements=[AnnouncementResponse.model_validate(a) for a in announcements]
    )


@router.post("", response_model=AnnouncementResponse, status_code=status.HTTP_201_CREATED)
def create_announcement(
    payload: AnnouncementCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    announcement_service: AnnouncementService = Depends(get_announcement_service),
) -> AnnouncementResponse:
    announcement = announcement_service.create_announcement(
        title=payload.title,
        content=payload.content,
        author=current_user.get("email"),
    )
    return AnnouncementResponse.model_validate(announcement)


@router.put(
    "/{announcement_id}",
    response_model=AnnouncementResponse,
    dependencies=[Depends(get_current_user)],
)
def update_announcement(
    announcement_id: str,
    payload: AnnouncementUpdate,
    announcement_service: AnnouncementService = Depends(get_announcement_service),
) -> AnnouncementResponse:
    announcement = announcement_service.update_announcement(
        announcement_id, title=payload.title, content=payload.content
    )
    return AnnouncementResponse.model_validate(announcement)


@router.delete(
    "/{announcement_id}",
    response_model=DeletedResponse,
    dependencies=[Depends(get_current_user)],
)
def delete_announcement(
    announcement_id: str,
    announcement_service: AnnouncementService = Depends(get_announcement_service),
) -> DeletedResponse:
    announcement_service.delete_announcement(announcement_id)
    return DeletedResponse(message="Announcement deleted", deleted_count=1)
