# backend/courtbook/services/dependencies.py
"""
Dependency injection functions for services.

Usage in routes:
    booking_service: BookingService = Depends(get_booking_service)
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from ..database import get_db
from ..integrations.stripe_gateway import PaymentGateway
from .announcement_service import AnnouncementService
from .booking_service import BookingService
from .coupon_service import CouponService
from .court_service import CourtService
from .payment_service import PaymentService
from .user_service import UserService


def get_payment_gateway(request: Request) -> PaymentGateway:
    """Gateway built at startup and stored on the application state."""
    return request.app.state.payment_gateway


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    return BookingService(db)


def get_payment_service(
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_payment_gateway),
    booking_service: BookingService = Depends(get_booking_service),
) -> PaymentService:
    """
    Dependency injection function for PaymentService.

    Shares the request session with the injected BookingService so webhook
    reconciliation runs in a single transaction.
    """
    return PaymentService(db, gateway, booking_service)


def get_coupon_service(db: Session = Depends(get_db)) -> CouponService:
    return CouponService(db)


def get_court_service(db: Session = Depends(get_db)) -> CourtService:
    return CourtService(db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_announcement_service(db: Session = Depends(get_db)) -> AnnouncementService:
    return AnnouncementService(db)
