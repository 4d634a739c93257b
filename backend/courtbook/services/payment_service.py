# backend/courtbook/services/payment_service.py
"""
Payment Service for the Courtbook API

Bridges the payment gateway and the booking lifecycle:
- creating card payment intents for a booking
- processing verified webhook deliveries
- auditing bookings confirmed by the gateway that lack a payment record
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.constants import BOOKING_METADATA_KEY, MIN_CHARGE_CENTS, PAYMENT_SUCCEEDED_EVENT
from ..core.exceptions import DomainException, ValidationException
from ..integrations.stripe_gateway import PaymentGateway
from ..models.booking import Booking
from ..monitoring.prometheus_metrics import prometheus_metrics
from ..utils.parsing import is_ulid, normalize_id, parse_decimal
from .base import BaseService
from .booking_service import BookingService

logger = logging.getLogger(__name__)


@dataclass
class WebhookResult:
    """Outcome of a verified webhook delivery, mapped to an HTTP response by the route."""

    received: bool
    status_code: int = 200
    status: Optional[str] = None
    error: Optional[str] = None

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"received": self.received}
        if self.status:
            body["status"] = self.status
        if self.error:
            body["error"] = self.error
        return body


class PaymentService(BaseService):
    """Service layer for payment intents and webhook reconciliation."""

    def __init__(
        self,
        db: Session,
        gateway: PaymentGateway,
        booking_service: Optional[BookingService] = None,
    ):
        super().__init__(db)
        self.gateway = gateway
        self.booking_service = booking_service or BookingService(db)

    @BaseService.measure_operation("request_payment_intent")
    def request_payment_intent(self, price: Any, booking_id: Any) -> str:
        """
        Create a card payment intent tagged with the booking id.

        Returns:
            The gateway client secret, verbatim

        Raises:
            ValidationException: If the price is missing, unparseable or
                below the gateway minimum, or the booking id is missing or not a ULID
            GatewayException: If the gateway call fails
        """
        amount = parse_decimal(price)
        amount_cents = 0
        if amount is not None:
            amount_cents = int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        if amount_cents < MIN_CHARGE_CENTS:
            raise ValidationException(
                "Invalid price amount. Must be at least $0.50.",
                code="INVALID_AMOUNT",
                details={"price": price},
            )
        if not booking_id:
            raise ValidationException("Booking ID is required", code="MISSING_BOOKING_ID")
        if not is_ulid(booking_id):
            raise ValidationException(
                "Invalid booking id", code="INVALID_ID", details={"bookingId": booking_id}
            )
        booking_id = normalize_id(booking_id)

        client_secret = self.gateway.create_payment_intent(
            amount_cents,
            settings.stripe_currency,
            {BOOKING_METADATA_KEY: booking_id},
        )
        self.logger.info(f"Payment intent requested for booking {booking_id} ({amount_cents} cents)")
        return client_secret

    def handle_webhook(self, payload: bytes, signature: Optional[str]) -> WebhookResult:
        """
        Verify and process a webhook delivery.

        Signature failures propagate as GatewayException so nothing is
        mutated. Once verified, the outcome is always expressed as a
        WebhookResult: processing failures become ``received: false`` with
        a 500 so the gateway retries.
        """
        try:
            event = self.gateway.construct_event(payload, signature)
        except DomainException:
            prometheus_metrics.record_webhook_event("unverified", "rejected")
            raise

        event_type = event.get("type", "")
        if event_type != PAYMENT_SUCCEEDED_EVENT:
            self.logger.info(f"Unhandled event type {event_type}")
            prometheus_metrics.record_webhook_event(event_type, "ignored")
            return WebhookResult(received=True, status="ignored")

        result = self._process_payment_succeeded(event)
        prometheus_metrics.record_webhook_event(
            event_type, "processed" if result.received else "failed"
        )
        return result

    @BaseService.measure_operation("process_payment_succeeded")
    def _process_payment_succeeded(self, event: Dict[str, Any]) -> WebhookResult:
        intent = (event.get("data") or {}).get("object") or {}
        intent_id = intent.get("id")
        metadata = intent.get("metadata") or {}
        booking_id = metadata.get(BOOKING_METADATA_KEY)

        self.logger.info(f"PaymentIntent was successful: {intent_id}")

        if not booking_id:
            self.logger.error(f"Booking ID missing in payment intent metadata ({intent_id})")
            return WebhookResult(
                received=False,
                status_code=500,
                error="Booking ID missing in payment intent metadata",
            )
        if not intent_id:
            self.logger.error(f"Payment intent id missing for booking {booking_id}")
            return WebhookResult(received=False, status_code=500, error="Payment intent id missing")

        try:
            self.booking_service.apply_payment_succeeded(
                str(booking_id),
                transaction_id=str(intent_id),
                amount_cents=int(intent.get("amount_received") or intent.get("amount") or 0),
                currency=str(intent.get("currency") or settings.stripe_currency),
                gateway_status=str(intent.get("status") or "succeeded"),
            )
        except DomainException as e:
            self.logger.error(f"Database update error after payment {intent_id}: {e.message}")
            return WebhookResult(received=False, status_code=500, error=e.message)

        self.logger.info(f"Successfully processed payment for booking {booking_id}")
        return WebhookResult(received=True)

    @BaseService.measure_operation("find_unreconciled_bookings")
    def find_unreconciled_bookings(self) -> List[Booking]:
        """Bookings the gateway confirmed that have no payment record."""
        bookings = list(self.booking_service.find_completed_without_record())
        if bookings:
            self.logger.warning(f"{len(bookings)} completed booking(s) without a payment record")
        return bookings
