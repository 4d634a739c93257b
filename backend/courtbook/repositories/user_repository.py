# backend/courtbook/repositories/user_repository.py
"""
User Repository for the Courtbook API

Handles User data access: lookups by id and by email, and role updates.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException
from ..models.user import User
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for User data access."""

    def __init__(self, db: Session):
        super().__init__(db, User)
        self.logger = logging.getLogger(__name__)

    def get_by_email(self, email: str) -> Optional[User]:
        try:
            return self.db.query(User).filter(User.email == email).first()
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting user by email {email}: {str(e)}")
            raise RepositoryException(f"Failed to retrieve user: {str(e)}")

    def set_role_by_email(self, email: str, role: str) -> bool:
        """
        Set the role of the user with ``email``.

        Returns:
            True if a user matched, False otherwise
        """
        try:
            updated = (
                self.db.query(User)
                .filter(User.email == email)
                .update({User.role: role}, synchronize_session="fetch")
            )
            return bool(updated)
        except SQLAlchemyError as e:
            self.logger.error(f"Error updating role for {email}: {str(e)}")
            raise RepositoryException(f"Failed to update user role: {str(e)}")
