# backend/courtbook/core/enums.py
"""
Core enums for the Courtbook API.

Values are stored verbatim in the database and sent to clients, so the
mixed casing of booking statuses is part of the wire format.
"""

from enum import Enum
from typing import Dict


class RoleName(str, Enum):
    """User roles. Members are users with at least one approved booking."""

    USER = "user"
    MEMBER = "member"
    ADMIN = "admin"


class BookingStatus(str, Enum):
    """Booking lifecycle statuses."""

    PENDING = "pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    CONFIRMED = "Confirmed"


class PaymentStatus(str, Enum):
    """
    Booking payment statuses.

    PAID is reported by the client after checkout, COMPLETED is confirmed
    by the payment gateway webhook.
    """

    PENDING = "pending"
    PAID = "paid"
    COMPLETED = "completed"


class CouponStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class PaymentConfirmation(str, Enum):
    """Who moved a booking to payment_status completed."""

    GATEWAY = "gateway"
    ADMIN = "admin"


class CourtStatus(str, Enum):
    AVAILABLE = "Available"
    UNAVAILABLE = "Unavailable"


# Statuses an administrator may set directly
ADMIN_DECISION_STATUSES = frozenset({BookingStatus.APPROVED, BookingStatus.REJECTED})

# Payment statuses only move forward along this order
PAYMENT_STATUS_RANK: Dict[str, int] = {
    PaymentStatus.PENDING.value: 0,
    PaymentStatus.PAID.value: 1,
    PaymentStatus.COMPLETED.value: 2,
}


def join_payment_status(current: str, incoming: str) -> str:
    """Return the higher of two payment statuses."""
    if PAYMENT_STATUS_RANK.get(incoming, 0) > PAYMENT_STATUS_RANK.get(current, 0):
        return incoming
    return current
