# backend/tests/unit/test_payment_service.py
"""
Payment intent and webhook reconciliation tests.

Webhook payloads are signed in Stripe's real header format so signature
verification runs through the Stripe SDK unmocked.
"""

from decimal import Decimal

import pytest

from courtbook.core.exceptions import GatewayException, ValidationException
from courtbook.models.payment import PaymentRecord
from courtbook.services.payment_service import PaymentService
from tests.helpers.payments import payment_succeeded_event, sign_payload

BOOKING_ID = "01HZX3K4M5N6P7Q8R9S0T1V2W3"


@pytest.fixture
def payment_service(db, gateway):
    return PaymentService(db, gateway)


class TestRequestPaymentIntent:
    def test_price_below_minimum_is_rejected(self, payment_service, gateway):
        with pytest.raises(ValidationException):
            payment_service.request_payment_intent("0.49", BOOKING_ID)
        assert gateway.intents == []

    def test_minimum_price_creates_intent(self, payment_service, gateway):
        secret = payment_service.request_payment_intent("0.50", BOOKING_ID)

        assert secret == "pi_test_1_secret_abc"
        assert gateway.intents == [
            {
                "id": "pi_test_1",
                "amount": 50,
                "currency": "usd",
                "metadata": {"bookingId": BOOKING_ID},
            }
        ]

    def test_amount_is_rounded_to_cents(self, payment_service, gateway):
        payment_service.request_payment_intent(19.999, BOOKING_ID)

        assert gateway.intents[0]["amount"] == 2000

    @pytest.mark.parametrize("price", [None, "", "abc", 0])
    def test_unparseable_price_is_rejected(self, payment_service, gateway, price):
        with pytest.raises(ValidationException):
            payment_service.request_payment_intent(price, BOOKING_ID)
        assert gateway.intents == []

    def test_missing_booking_id_is_rejected(self, payment_service, gateway):
        with pytest.raises(ValidationException):
            payment_service.request_payment_intent("25.00", None)
        assert gateway.intents == []

    @pytest.mark.parametrize("booking_id", ["booking-1", "01HZX3K4M5N6P7Q8R9S0T1V2W", 42])
    def test_malformed_booking_id_is_rejected(self, payment_service, gateway, booking_id):
        with pytest.raises(ValidationException):
            payment_service.request_payment_intent("25.00", booking_id)
        assert gateway.intents == []

    def test_booking_id_is_upper_cased_in_metadata(self, payment_service, gateway):
        payment_service.request_payment_intent("25.00", BOOKING_ID.lower())

        assert gateway.intents[0]["metadata"] == {"bookingId": BOOKING_ID}

    def test_booking_is_not_modified(self, payment_service, make_booking):
        booking = make_booking()

        payment_service.request_payment_intent("25.00", booking.id)

        assert booking.status == "pending"
        assert booking.payment_status == "pending"


class TestHandleWebhook:
    def test_invalid_signature_mutates_nothing(self, payment_service, make_booking, db):
        booking = make_booking()
        payload = payment_succeeded_event(booking.id)

        with pytest.raises(GatewayException) as exc_info:
            payment_service.handle_webhook(payload, sign_payload(payload, secret="whsec_wrong"))

        db.refresh(booking)
        assert exc_info.value.status_code == 400
        assert booking.status == "pending"
        assert booking.payment_status == "pending"
        assert db.query(PaymentRecord).count() == 0

    def test_missing_signature_is_rejected(self, payment_service, make_booking):
        booking = make_booking()

        with pytest.raises(GatewayException) as exc_info:
            payment_service.handle_webhook(payment_succeeded_event(booking.id), None)

        assert exc_info.value.status_code == 400

    def test_tampered_payload_is_rejected(self, payment_service, make_booking):
        booking = make_booking()
        signed = payment_succeeded_event(booking.id, amount=2500)
        tampered = payment_succeeded_event(booking.id, amount=1)

        with pytest.raises(GatewayException):
            payment_service.handle_webhook(tampered, sign_payload(signed))

    def test_succeeded_payment_confirms_booking(self, payment_service, make_booking, db):
        booking = make_booking()
        payload = payment_succeeded_event(booking.id, intent_id="pi_abc", amount=2500)

        result = payment_service.handle_webhook(payload, sign_payload(payload))

        assert result.received is True
        assert result.status_code == 200
        assert result.to_body() == {"received": True}
        db.refresh(booking)
        assert booking.status == "Confirmed"
        assert booking.payment_status == "completed"
        record = db.query(PaymentRecord).filter(PaymentRecord.transaction_id == "pi_abc").one()
        assert record.booking_id == booking.id
        assert record.amount == Decimal("25.00")
        assert record.status == "succeeded"

    def test_redelivery_records_payment_once(self, payment_service, make_booking, db):
        booking = make_booking()
        payload = payment_succeeded_event(booking.id, intent_id="pi_dup")

        first = payment_service.handle_webhook(payload, sign_payload(payload))
        second = payment_service.handle_webhook(payload, sign_payload(payload))

        assert first.received is True
        assert second.received is True
        assert db.query(PaymentRecord).filter(PaymentRecord.booking_id == booking.id).count() == 1

    def test_other_events_are_ignored(self, payment_service, make_booking, db):
        booking = make_booking()
        payload = payment_succeeded_event(booking.id, event_type="payment_intent.created")

        result = payment_service.handle_webhook(payload, sign_payload(payload))

        assert result.to_body() == {"received": True, "status": "ignored"}
        db.refresh(booking)
        assert booking.payment_status == "pending"

    def test_missing_booking_metadata_asks_for_retry(self, payment_service, db):
        payload = payment_succeeded_event(None)

        result = payment_service.handle_webhook(payload, sign_payload(payload))

        assert result.received is False
        assert result.status_code == 500
        assert db.query(PaymentRecord).count() == 0

    def test_unknown_booking_asks_for_retry(self, payment_service, unknown_id, db):
        payload = payment_succeeded_event(unknown_id)

        result = payment_service.handle_webhook(payload, sign_payload(payload))

        assert result.received is False
        assert result.status_code == 500
        assert db.query(PaymentRecord).count() == 0

    def test_lower_case_booking_id_in_metadata_is_confirmed(
        self, payment_service, make_booking, db
    ):
        booking = make_booking()
        payload = payment_succeeded_event(booking.id.lower(), intent_id="pi_lower")

        result = payment_service.handle_webhook(payload, sign_payload(payload))

        assert result.received is True
        db.refresh(booking)
        assert booking.status == "Confirmed"
        assert booking.payment_status == "completed"
        record = db.query(PaymentRecord).filter(PaymentRecord.transaction_id == "pi_lower").one()
        assert record.booking_id == booking.id

    def test_late_client_callback_keeps_completed(self, payment_service, make_booking, db):
        booking = make_booking()
        payload = payment_succeeded_event(booking.id, intent_id="pi_race")
        payment_service.handle_webhook(payload, sign_payload(payload))

        payment_service.booking_service.record_client_payment(booking.id, "pi_race")

        db.refresh(booking)
        assert booking.payment_status == "completed"
        assert booking.status == "Confirmed"


class TestReconciliationAudit:
    def test_completed_without_record_is_reported(self, payment_service, make_booking):
        orphan = make_booking(payment_status="completed", status="Confirmed")

        unreconciled = payment_service.find_unreconciled_bookings()

        assert [b.id for b in unreconciled] == [orphan.id]

    def test_webhook_confirmed_booking_is_reconciled(self, payment_service, make_booking):
        booking = make_booking()
        payload = payment_succeeded_event(booking.id)
        payment_service.handle_webhook(payload, sign_payload(payload))

        assert payment_service.find_unreconciled_bookings() == []

    def test_admin_override_is_not_reported(self, payment_service, make_booking, db):
        booking = make_booking()

        payment_service.booking_service.update_payment_status(booking.id, "completed")

        db.refresh(booking)
        assert booking.confirmed_by == "admin"
        assert payment_service.find_unreconciled_bookings() == []

    def test_gateway_confirmation_after_override_is_flagged_gateway(
        self, payment_service, make_booking, db
    ):
        booking = make_booking()
        payment_service.booking_service.update_payment_status(booking.id, "completed")
        payload = payment_succeeded_event(booking.id, intent_id="pi_after_override")

        payment_service.handle_webhook(payload, sign_payload(payload))

        db.refresh(booking)
        assert booking.confirmed_by == "gateway"
        assert db.query(PaymentRecord).filter(PaymentRecord.booking_id == booking.id).count() == 1
        assert payment_service.find_unreconciled_bookings() == []
