# backend/courtbook/repositories/payment_repository.py
"""
Payment Repository for the Courtbook API

Payment records are append-only. The only write is an insert keyed by the
gateway transaction id.
"""

from decimal import Decimal
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException
from ..models.payment import PaymentRecord
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class PaymentRepository(BaseRepository[PaymentRecord]):
    def __init__(self, db: Session):
        super().__init__(db, PaymentRecord)
        self.logger = logging.getLogger(__name__)

    def get_by_transaction_id(self, transaction_id: str) -> Optional[PaymentRecord]:
        try:
            return (
                self.db.query(PaymentRecord)
                .filter(PaymentRecord.transaction_id == transaction_id)
                .first()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting payment record {transaction_id}: {str(e)}")
            raise RepositoryException(f"Failed to retrieve payment record: {str(e)}")

    def create_payment_record(
        self,
        *,
        booking_id: str,
        transaction_id: str,
        amount: Decimal,
        currency: str,
        status: str,
    ) -> PaymentRecord:
        return self.create(
            booking_id=booking_id,
            transaction_id=transaction_id,
            amount=amount,
            currency=currency,
            status=status,
        )
