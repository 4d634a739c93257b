from .announcement_service import AnnouncementService
from .base import BaseService
from .booking_service import BookingService
from .coupon_service import CouponService
from .court_service import CourtService
from .payment_service import PaymentService, WebhookResult
from .user_service import UserService

__all__ = [
    "AnnouncementService",
    "BaseService",
    "BookingService",
    "CouponService",
    "CourtService",
    "PaymentService",
    "UserService",
    "WebhookResult",
]
