# backend/courtbook/models/booking.py
"""
Booking model for the Courtbook API.

A booking is a request for one or more slot labels on a court for a given
date. Two independent fields track its state:

- ``status``: pending -> Approved/Rejected by an administrator, and
  Confirmed once the payment gateway reports a successful charge.
- ``payment_status``: pending -> paid (client reported) -> completed
  (gateway confirmed). It only ever moves forward.
- ``confirmed_by``: whether the gateway or an administrator override
  moved payment_status to completed. Only gateway confirmations are
  expected to carry a payment record.

court_id and user_id are plain references without foreign keys: bookings
outlive the courts and users they point at, and listings join them with
outer joins.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import JSON, CheckConstraint, Date, DateTime, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from ..core.enums import BookingStatus, PaymentStatus
from ..database import Base
from .types import new_id, utcnow


class Booking(Base):
    __tablename__ = "bookings"

    __table_args__ = (
        CheckConstraint("price > 0", name="ck_bookings_price_positive"),
        CheckConstraint(
            "status IN ('pending', 'Approved', 'Rejected', 'Confirmed')",
            name="ck_bookings_status",
        ),
        CheckConstraint(
            "payment_status IN ('pending', 'paid', 'completed')",
            name="ck_bookings_payment_status",
        ),
        Index("ix_bookings_status_payment", "status", "payment_status"),
    )

    id: Mapped[str] = mapped_column(String(26), primary_key=True, default=new_id)
    court_id: Mapped[str] = mapped_column(String(26), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(26), nullable=False, index=True)
    user_email: Mapped[str] = mapped_column(String(255), nullable=False)
    slots: Mapped[List[str]] = mapped_column(JSON, nullable=False)
    booking_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=BookingStatus.PENDING.value
    )
    payment_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PaymentStatus.PENDING.value
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    transaction_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    paid_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    # gateway or admin; set when payment_status first reaches completed
    confirmed_by: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, status={self.status}, "
            f"payment_status={self.payment_status})>"
        )
