"""Stripe webhook helpers: real-format signatures and a recording gateway."""

import hashlib
import hmac
import json
import time
from typing import Any, Dict, List, Optional

from courtbook.integrations.stripe_gateway import StripeGateway

WEBHOOK_SECRET = "whsec_test_secret"


class FakeStripeGateway(StripeGateway):
    """Records payment intents locally; webhook verification stays real."""

    def __init__(self) -> None:
        super().__init__(secret_key="", webhook_secret=WEBHOOK_SECRET, currency="usd")
        self.intents: List[Dict[str, Any]] = []

    def create_payment_intent(
        self, amount_cents: int, currency: str, metadata: Dict[str, str]
    ) -> str:
        intent_id = f"pi_test_{len(self.intents) + 1}"
        self.intents.append(
            {"id": intent_id, "amount": amount_cents, "currency": currency, "metadata": metadata}
        )
        return f"{intent_id}_secret_abc"


def sign_payload(
    payload: bytes, secret: str = WEBHOOK_SECRET, timestamp: Optional[int] = None
) -> str:
    """Build a Stripe-Signature header in the real ``t=...,v1=...`` format."""
    ts = timestamp if timestamp is not None else int(time.time())
    signed = f"{ts}.{payload.decode('utf-8')}".encode("utf-8")
    signature = hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()
    return f"t={ts},v1={signature}"


def payment_succeeded_event(
    booking_id: Optional[str],
    *,
    intent_id: str = "pi_test_1",
    amount: int = 2500,
    currency: str = "usd",
    event_type: str = "payment_intent.succeeded",
) -> bytes:
    metadata = {"bookingId": booking_id} if booking_id else {}
    event = {
        "id": f"evt_{intent_id}",
        "object": "event",
        "type": event_type,
        "data": {
            "object": {
                "id": intent_id,
                "object": "payment_intent",
                "amount": amount,
                "amount_received": amount,
                "currency": currency,
                "status": "succeeded",
                "metadata": metadata,
            }
        },
    }
    return json.dumps(event).encode("utf-8")
