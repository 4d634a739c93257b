# backend/courtbook/routes/bookings.py
"""
Booking routes

All endpoints require a session cookie.

Endpoints:
    GET /bookings                        → List bookings (status, paymentStatus, courtName, userId filters)
    POST /bookings                       → Create a booking (pending/pending)
    PUT /bookings/{booking_id}/status    → Approve or reject
    PUT /bookings/{booking_id}/payment   → Administrative payment status override
    DELETE /bookings/{booking_id}        → Delete a booking
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ..auth import get_current_user
from ..models.booking import Booking
from ..schemas.booking import (
    BookingCreate,
    BookingCreatedResponse,
    BookingListResponse,
    BookingPaymentUpdate,
    BookingResponse,
    BookingStatusUpdate,
)
from ..schemas.common import DeletedResponse
from ..services.booking_service import BookingService
from ..services.dependencies import get_booking_service

router = APIRouter(
    prefix="/bookings", tags=["bookings"], dependencies=[Depends(get_current_user)]
)


def _to_response(
    booking: Booking, user_name: Optional[str] = None, court_name: Optional[str] = None
) -> BookingResponse:
    return BookingResponse(
        id=booking.id,
        court_id=booking.court_id,
        user_id=booking.user_id,
        user_email=booking.user_email,
        user_name=user_name,
        court_name=court_name,
        slots=list(booking.slots),
        booking_date=booking.booking_date,
        price=booking.price,
        status=booking.status,
        payment_status=booking.payment_status,
        transaction_id=booking.transaction_id,
        paid_at=booking.paid_at,
        confirmed_by=booking.confirmed_by,
        created_at=booking.created_at,
    )


@router.get("", response_model=BookingListResponse)
def list_bookings(
    status_filter: Optional[str] = Query(default=None, alias="status"),
    payment_status: Optional[str] = Query(default=None, alias="paymentStatus"),
    court_name: Optional[str] = Query(default=None, alias="courtName"),
    user_id: Optional[str] = Query(default=None, alias="userId"),
    booking_service: BookingService = Depends(get_booking_service),
) -> BookingListResponse:
    rows = booking_service.list_bookings(
        status=status_filter,
        payment_status=payment_status,
        court_name=court_name,
        user_id=user_id,
    )
    return BookingListResponse(
        bookings=[
            _to_response(row["booking"], row["user_name"], row["court_name"]) for row in rows
        ]
    )


@router.post("", response_model=BookingCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: BookingCreate,
    booking_service: BookingService = Depends(get_booking_service),
) -> BookingCreatedResponse:
    booking = booking_service.create_booking(
        court_id=payload.court_id,
        user_id=payload.user_id,
        user_email=payload.user_email,
        slots=payload.slots,
        date=payload.booking_date,
        price=payload.price,
    )
    return BookingCreatedResponse(booking_id=booking.id, booking=_to_response(booking))


@router.put("/{booking_id}/status", response_model=BookingResponse)
def update_booking_status(
    booking_id: str,
    payload: BookingStatusUpdate,
    booking_service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    """
    Approve or reject a booking.

    Approval also promotes the booking's user to member.
    """
    booking = booking_service.set_booking_status(
        booking_id,
        payload.status,
        user_email=payload.user_email,
        user_id=payload.user_id,
    )
    return _to_response(booking)


@router.put("/{booking_id}/payment", response_model=BookingResponse)
def update_booking_payment(
    booking_id: str,
    payload: BookingPaymentUpdate,
    booking_service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    booking = booking_service.update_payment_status(booking_id, payload.payment_status)
    return _to_response(booking)


@router.delete("/{booking_id}", response_model=DeletedResponse)
def delete_booking(
    booking_id: str,
    booking_service: BookingService = Depends(get_booking_service),
) -> DeletedResponse:
    booking_service.delete_booking(booking_id)
    return DeletedResponse(message="Booking deleted", deleted_count=1)
