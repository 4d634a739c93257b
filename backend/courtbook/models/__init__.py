# backend/courtbook/models/__init__.py
"""
Database models for the Courtbook API.

Importing this package registers every table on ``Base.metadata``.
"""

from .announcement import Announcement
from .booking import Booking
from .coupon import Coupon
from .court import Court
from .payment import PaymentRecord
from .user import User

__all__ = [
    "Announcement",
    "Booking",
    "Coupon",
    "Court",
    "PaymentRecord",
    "User",
]
