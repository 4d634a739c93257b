# backend/courtbook/integrations/stripe_gateway.py
"""
Stripe gateway adapter for the Courtbook API.

Wraps the two Stripe calls the booking flow needs: creating a card payment
intent and verifying a signed webhook delivery. Services depend on the
``PaymentGateway`` protocol so tests can substitute a fake.
"""

import json
import logging
from typing import Any, Dict, Optional, Protocol

import stripe

from ..core.config import settings
from ..core.exceptions import GatewayException, ServiceException

logger = logging.getLogger(__name__)


class PaymentGateway(Protocol):
    def create_payment_intent(
        self, amount_cents: int, currency: str, metadata: Dict[str, str]
    ) -> str: ...

    def construct_event(self, payload: bytes, signature: Optional[str]) -> Dict[str, Any]: ...


class StripeGateway:
    """Payment gateway backed by the Stripe API."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        webhook_secret: Optional[str] = None,
        currency: Optional[str] = None,
    ) -> None:
        self.secret_key = (
            secret_key
            if secret_key is not None
            else settings.stripe_secret_key.get_secret_value()
        )
        self.webhook_secret = (
            webhook_secret
            if webhook_secret is not None
            else settings.stripe_webhook_secret.get_secret_value()
        )
        self.currency = currency or settings.stripe_currency

        if self.secret_key:
            stripe.api_key = self.secret_key
            stripe.max_network_retries = 1
            logger.info("Stripe gateway configured successfully")
        else:
            logger.warning("Stripe secret key not configured - payment intents will fail")

    def create_payment_intent(
        self, amount_cents: int, currency: str, metadata: Dict[str, str]
    ) -> str:
        """
        Create a card payment intent and return its client secret.

        Raises:
            GatewayException: If Stripe is not configured or the call fails
        """
        if not self.secret_key:
            raise GatewayException("Payment gateway not configured", code="GATEWAY_NOT_CONFIGURED")

        try:
            intent = stripe.PaymentIntent.create(
                amount=amount_cents,
                currency=currency or self.currency,
                payment_method_types=["card"],
                metadata=metadata,
                api_key=self.secret_key,
            )
        except stripe.StripeError as e:
            logger.error(f"Stripe error creating payment intent: {str(e)}")
            raise GatewayException(
                "Payment provider rejected the request",
                code="GATEWAY_ERROR",
                details={"reason": getattr(e, "user_message", None) or str(e)},
            ) from e

        logger.info(f"Created payment intent {intent.id} for {metadata}")
        return intent.client_secret

    def construct_event(self, payload: bytes, signature: Optional[str]) -> Dict[str, Any]:
        """
        Verify a webhook delivery and return the event as a plain dict.

        Raises:
            GatewayException: With ``signature_error`` set when the header is
                missing or does not match the payload
        """
        if not signature:
            raise GatewayException(
                "Missing Stripe-Signature header", code="MISSING_SIGNATURE", signature_error=True
            )
        if not self.webhook_secret:
            raise ServiceException("Webhook secret not configured", code="WEBHOOK_NOT_CONFIGURED")

        try:
            stripe.Webhook.construct_event(payload, signature, self.webhook_secret)
        except stripe.SignatureVerificationError as e:
            logger.warning(f"Invalid webhook signature: {str(e)}")
            raise GatewayException(
                "Invalid webhook signature", code="INVALID_SIGNATURE", signature_error=True
            ) from e
        except ValueError as e:
            logger.warning(f"Malformed webhook payload: {str(e)}")
            raise GatewayException(
                "Malformed webhook payload", code="INVALID_PAYLOAD", signature_error=True
            ) from e

        # Signature verified; work with the raw JSON rather than StripeObject
        event: Dict[str, Any] = json.loads(payload)
        return event
