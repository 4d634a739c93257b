# backend/courtbook/repositories/booking_repository.py
"""
Booking Repository for the Courtbook API

Implements all data access operations for booking management,
including the enriched listing query (booking -> user, booking -> court)
and the reconciliation audit query.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import and_, exists, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.enums import PaymentConfirmation, PaymentStatus
from ..core.exceptions import RepositoryException
from ..models.booking import Booking
from ..models.court import Court
from ..models.payment import PaymentRecord
from ..models.user import User
from ..utils.parsing import normalize_id
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class BookingRepository(BaseRepository[Booking]):
    """Repository for booking data access."""

    def __init__(self, db: Session):
        super().__init__(db, Booking)
        self.logger = logging.getLogger(__name__)

    def get_for_update(self, booking_id: str) -> Optional[Booking]:
        """
        Load a booking with a row lock where the dialect supports it.

        Payment paths read-modify-write payment_status, so concurrent
        deliveries for the same booking must serialize on the row.
        """
        try:
            query = self.db.query(Booking).filter(Booking.id == normalize_id(booking_id))
            if self.db.get_bind().dialect.name != "sqlite":
                query = query.with_for_update()
            return query.first()
        except SQLAlchemyError as e:
            self.logger.error(f"Error locking booking {booking_id}: {str(e)}")
            raise RepositoryException(f"Failed to load booking: {str(e)}")

    def list_enriched(
        self,
        *,
        status: Optional[str] = None,
        payment_status: Optional[str] = None,
        court_name: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        List bookings joined with their user name and court name.

        Both joins are outer joins: a booking whose court or user was deleted
        is still listed, with the missing name left empty.
        """
        try:
            query = (
                self.db.query(Booking, User.name, Court.name)
                .outerjoin(User, User.id == Booking.user_id)
                .outerjoin(Court, Court.id == Booking.court_id)
            )
            if status:
                query = query.filter(Booking.status == status)
            if payment_status:
                query = query.filter(Booking.payment_status == payment_status)
            if user_id:
                query = query.filter(Booking.user_id == normalize_id(user_id))
            if court_name:
                query = query.filter(Court.name.ilike(f"%{court_name}%"))

            rows = query.order_by(Booking.created_at.desc()).all()
            return [
                {"booking": booking, "user_name": user_name, "court_name": court_name_value}
                for booking, user_name, court_name_value in rows
            ]
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing bookings: {str(e)}")
            raise RepositoryException(f"Failed to list bookings: {str(e)}")

    def find_completed_without_payment_record(self) -> List[Booking]:
        """
        Gateway-confirmed bookings that have no payment record.

        Bookings an administrator marked completed never had a gateway
        charge and are left out.
        """
        try:
            has_record = exists().where(PaymentRecord.booking_id == Booking.id)
            return (
                self.db.query(Booking)
                .filter(
                    and_(
                        Booking.payment_status == PaymentStatus.COMPLETED.value,
                        or_(
                            Booking.confirmed_by.is_(None),
                            Booking.confirmed_by != PaymentConfirmation.ADMIN.value,
                        ),
                        ~has_record,
                    )
                )
                .order_by(Booking.created_at)
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error auditing bookings: {str(e)}")
            raise RepositoryException(f"Failed to audit bookings: {str(e)}")
