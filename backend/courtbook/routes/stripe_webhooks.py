# backend/courtbook/routes/stripe_webhooks.py
"""
Stripe webhook route.

Signature verification needs the request body exactly as sent, so this
handler declares no parsed body parameter and reads ``request.body()``.
The router is included ahead of every other router in ``create_app``.
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..schemas.payment import WebhookResponse
from ..services.dependencies import get_payment_service
from ..services.payment_service import PaymentService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhooks"])


@router.post(
    "/webhooks/stripe",
    response_model=WebhookResponse,
    responses={400: {"description": "Missing or invalid signature"}},
)
async def handle_stripe_webhook(
    request: Request,
    payment_service: PaymentService = Depends(get_payment_service),
) -> JSONResponse:
    """
    Handle Stripe webhook events.

    Returns:
        200 ``{"received": true}`` once a succeeded payment is reconciled (or
        the event is ignored); 500 ``{"received": false}`` when processing
        failed and Stripe should retry.

    Note:
        This endpoint has no session authentication; it relies on webhook
        signature verification.
    """
    payload = await request.body()
    sig_header = request.headers.get("stripe-signature")

    if not sig_header:
        logger.warning("Webhook received without signature")

    result = await asyncio.to_thread(payment_service.handle_webhook, payload, sig_header)
    return JSONResponse(content=result.to_body(), status_code=result.status_code)
