# backend/courtbook/services/announcement_service.py
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.constants import DEFAULT_ANNOUNCEMENT_AUTHOR
from ..core.exceptions import NotFoundException, ValidationException
from ..models.announcement import Announcement
from ..repositories.factory import RepositoryFactory
from .base import BaseService


class AnnouncementService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = RepositoryFactory.create_base_repository(db, Announcement)

    def list_announcements(self, title: Optional[str] = None) -> List[Announcement]:
        return self.repository.search("title", title)

    @BaseService.measure_operation("create_announcement")
    def create_announcement(
        self, *, title: Optional[str], content: Optional[str], author: Optional[str]
    ) -> Announcement:
        if not title or not content:
            raise ValidationException("Title and content are required", code="MISSING_FIELDS")

        with self.transaction():
            announcement = self.repository.create(
                title=title,
                content=content,
                created_by=author or DEFAULT_ANNOUNCEMENT_AUTHOR,
            )
        return announcement

    @BaseService.measure_operation("update_announcement")
    def update_announcement(
        self, announcement_id: str, *, title: Optional[str], content: Optional[str]
    ) -> Announcement:
        if not title and not content:
            raise ValidationException(
                "At least one field (title or content) is required", code="MISSING_FIELDS"
            )
        updates = {key: value for key, value in (("title", title), ("content", content)) if value}

        with self.transaction():
            announcement = self.repository.update(announcement_id, **updates)
            if not announcement:
                raise NotFoundException("Announcement not found", code="ANNOUNCEMENT_NOT_FOUND")
        return announcement

    @BaseService.measure_operation("delete_announcement")
    def delete_announcement(self, announcement_id: str) -> None:
        with self.transaction():
            deleted = self.repository.delete(announcement_id)
        if not deleted:
            raise NotFoundException("Announcement not found", code="ANNOUNCEMENT_NOT_FOUND")
