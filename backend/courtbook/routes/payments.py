# backend/courtbook/routes/payments.py
"""
Payment routes

Endpoints:
    POST /payments/intent          → Create a card payment intent for a booking (public)
    POST /payments/success         → Client-reported payment success
    GET /payments/reconciliation   → Completed bookings without a payment record

The webhook lives in ``stripe_webhooks`` so it can be mounted first.
"""

import asyncio

from fastapi import APIRouter, Depends

from ..auth import get_current_user
from ..schemas.common import SuccessResponse
from ..schemas.payment import (
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentSuccessRequest,
    ReconciliationReport,
    UnreconciledBooking,
)
from ..services.booking_service import BookingService
from ..services.dependencies import get_booking_service, get_payment_service
from ..services.payment_service import PaymentService

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    payload: PaymentIntentRequest,
    payment_service: PaymentService = Depends(get_payment_service),
) -> PaymentIntentResponse:
    """Create a payment intent; the booking itself is not modified."""
    client_secret = await asyncio.to_thread(
        payment_service.request_payment_intent, payload.price, payload.booking_id
    )
    return PaymentIntentResponse(client_secret=client_secret)


@router.post(
    "/success", response_model=SuccessResponse, dependencies=[Depends(get_current_user)]
)
def record_payment_success(
    payload: PaymentSuccessRequest,
    booking_service: BookingService = Depends(get_booking_service),
) -> SuccessResponse:
    booking_service.record_client_payment(payload.booking_id, payload.transaction_id)
    return SuccessResponse()


@router.get(
    "/reconciliation",
    response_model=ReconciliationReport,
    dependencies=[Depends(get_current_user)],
)
def reconciliation_report(
    payment_service: PaymentService = Depends(get_payment_service),
) -> ReconciliationReport:
    bookings = payment_service.find_unreconciled_bookings()
    return ReconciliationReport(
        count=len(bookings),
        bookings=[UnreconciledBooking.model_validate(b) for b in bookings],
    )
