# backend/courtbook/services/user_service.py
"""
User Service for the Courtbook API

Signup is idempotent by email. Roles change only through the explicit
administrator route or the member promotion that follows an approved
booking.
"""

import logging
from typing import Any, List, Optional, Tuple

from sqlalchemy.orm import Session

from ..core.enums import RoleName
from ..core.exceptions import NotFoundException, ValidationException
from ..models.user import User
from ..repositories.factory import RepositoryFactory
from .base import BaseService

logger = logging.getLogger(__name__)


class UserService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = RepositoryFactory.create_user_repository(db)

    @BaseService.measure_operation("signup_user")
    def signup(self, *, name: Optional[str], email: Optional[str]) -> Tuple[User, bool]:
        """
        Register a user with role ``user``.

        Returns:
            (user, created) where created is False when the email was
            already registered and the existing user is returned
        """
        if not name or not email:
            raise ValidationException("Name and email required", code="MISSING_FIELDS")

        with self.transaction():
            existing = self.repository.get_by_email(email)
            if existing:
                return existing, False
            user = self.repository.create(name=name, email=email, role=RoleName.USER.value)

        self.logger.info(f"Registered user {user.email}")
        return user, True

    def list_users(self) -> List[User]:
        return self.repository.get_all()

    @BaseService.measure_operation("delete_user")
    def delete_user(self, user_id: str) -> None:
        with self.transaction():
            deleted = self.repository.delete(user_id)
        if not deleted:
            raise NotFoundException("User not found", code="USER_NOT_FOUND")

    @BaseService.measure_operation("set_user_role")
    def set_role(self, user_id: str, role: Any) -> User:
        if role not in {r.value for r in RoleName}:
            raise ValidationException("Invalid role", code="INVALID_ROLE", details={"role": role})

        with self.transaction():
            user = self.repository.update(user_id, role=role)
            if not user:
                raise NotFoundException("User not found", code="USER_NOT_FOUND")

        self.logger.info(f"User {user.email} role set to {role}")
        return user
