"""
Payment record model.

One row per successful gateway charge. Rows are append-only; the unique
constraint on transaction_id keeps webhook redeliveries from creating
duplicates.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base
from .types import new_id, utcnow


class PaymentRecord(Base):
    __tablename__ = "payment_records"

    id: Mapped[str] = mapped_column(String(26), primary_key=True, default=new_id)
    booking_id: Mapped[str] = mapped_column(String(26), nullable=False, index=True)
    transaction_id: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    amount: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), nullable=False, comment="Amount in currency units"
    )
    currency: Mapped[str] = mapped_column(String(10), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    def __repr__(self) -> str:
        return f"<PaymentRecord(booking_id={self.booking_id}, transaction_id={self.transaction_id})>"
