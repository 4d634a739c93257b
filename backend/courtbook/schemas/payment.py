from datetime import date, datetime
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import Field, field_serializer

from ._strict_base import RequestModel, StrictModel


class PaymentIntentRequest(RequestModel):
    price: Optional[Any] = None
    booking_id: Optional[Any] = Field(default=None, alias="bookingId")


class PaymentIntentResponse(StrictModel):
    client_secret: str = Field(alias="clientSecret")


class PaymentSuccessRequest(RequestModel):
    booking_id: Optional[str] = Field(default=None, alias="bookingId")
    transaction_id: Optional[str] = Field(default=None, alias="transactionId")


class UnreconciledBooking(StrictModel):
    id: str
    user_email: str = Field(alias="userEmail")
    booking_date: date = Field(alias="date")
    price: Decimal
    status: str
    payment_status: str = Field(alias="paymentStatus")
    transaction_id: Optional[str] = Field(default=None, alias="transactionId")
    created_at: datetime = Field(alias="createdAt")

    @field_serializer("price")
    def _price_as_float(self, value: Decimal) -> float:
        return float(value)


class ReconciliationReport(StrictModel):
    count: int
    bookings: List[UnreconciledBooking]


class WebhookResponse(StrictModel):
    """Acknowledgement returned to the payment gateway."""

    received: bool
    status: Optional[str] = None
    error: Optional[str] = None
