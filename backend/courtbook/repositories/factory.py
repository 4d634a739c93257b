# backend/courtbook/repositories/factory.py
"""
Repository Factory for the Courtbook API

Provides centralized creation of repository instances,
ensuring consistent initialization and dependency injection.
"""

from typing import Any

from sqlalchemy.orm import Session

from .base_repository import BaseRepository
from .booking_repository import BookingRepository
from .payment_repository import PaymentRepository
from .user_repository import UserRepository


class RepositoryFactory:
    """
    Factory class for creating repository instances.

    Centralizes repository creation to ensure consistent initialization
    and makes it easy to swap implementations if needed.
    """

    @staticmethod
    def create_base_repository(db: Session, model: Any) -> BaseRepository:
        """Create a generic base repository for any model."""
        return BaseRepository(db, model)

    @staticmethod
    def create_booking_repository(db: Session) -> BookingRepository:
        return BookingRepository(db)

    @staticmethod
    def create_user_repository(db: Session) -> UserRepository:
        return UserRepository(db)

    @staticmethod
    def create_payment_repository(db: Session) -> PaymentRepository:
        return PaymentRepository(db)
