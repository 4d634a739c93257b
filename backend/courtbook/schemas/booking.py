from datetime import date, datetime
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import Field, field_serializer

from ._strict_base import RequestModel, StrictModel


class BookingCreate(RequestModel):
    court_id: Optional[Any] = Field(default=None, alias="courtId")
    user_id: Optional[Any] = Field(default=None, alias="userId")
    user_email: Optional[Any] = Field(default=None, alias="userEmail")
    slots: Optional[Any] = None
    booking_date: Optional[Any] = Field(default=None, alias="date")
    price: Optional[Any] = None


class BookingStatusUpdate(RequestModel):
    status: Optional[str] = None
    user_email: Optional[str] = Field(default=None, alias="userEmail")
    user_id: Optional[str] = Field(default=None, alias="userId")


class BookingPaymentUpdate(RequestModel):
    payment_status: Optional[str] = Field(default=None, alias="paymentStatus")


class BookingResponse(StrictModel):
    id: str
    court_id: str = Field(alias="courtId")
    user_id: str = Field(alias="userId")
    user_email: str = Field(alias="userEmail")
    user_name: Optional[str] = Field(default=None, alias="userName")
    court_name: Optional[str] = Field(default=None, alias="courtName")
    slots: List[str]
    booking_date: date = Field(alias="date")
    price: Decimal
    status: str
    payment_status: str = Field(alias="paymentStatus")
    transaction_id: Optional[str] = Field(default=None, alias="transactionId")
    paid_at: Optional[datetime] = Field(default=None, alias="paidAt")
    confirmed_by: Optional[str] = Field(default=None, alias="confirmedBy")
    created_at: datetime = Field(alias="createdAt")

    @field_serializer("price")
    def _price_as_float(self, value: Decimal) -> float:
        return float(value)


class BookingCreatedResponse(StrictModel):
    message: str = "Booking created"
    booking_id: str = Field(alias="bookingId")
    booking: BookingResponse


class BookingListResponse(StrictModel):
    bookings: List[BookingResponse]
