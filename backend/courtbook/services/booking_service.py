# backend/courtbook/services/booking_service.py
"""
Booking Service for the Courtbook API

Owns the booking lifecycle:
- creation (pending/pending)
- administrator approve/reject, with member promotion on approval
- payment status changes from the admin override, the client success
  callback and the gateway webhook

payment_status only ever moves forward along pending < paid < completed.
Every payment path goes through ``join_payment_status`` so a late client
callback can never undo a gateway confirmation.
"""

from datetime import datetime, timezone
from decimal import Decimal
import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from ..core.enums import (
    ADMIN_DECISION_STATUSES,
    PAYMENT_STATUS_RANK,
    BookingStatus,
    PaymentConfirmation,
    PaymentStatus,
    RoleName,
    join_payment_status,
)
from ..core.exceptions import NotFoundException, ServiceException, ValidationException
from ..models.booking import Booking
from ..repositories.factory import RepositoryFactory
from ..utils.parsing import is_ulid, parse_decimal, parse_iso_date
from .base import BaseService

logger = logging.getLogger(__name__)

# Statuses the admin override may request
OVERRIDE_PAYMENT_STATUSES = frozenset({PaymentStatus.PENDING.value, PaymentStatus.COMPLETED.value})


class BookingService(BaseService):
    """Service layer for booking operations."""

    def __init__(self, db: Session):
        super().__init__(db)
        self.booking_repository = RepositoryFactory.create_booking_repository(db)
        self.user_repository = RepositoryFactory.create_user_repository(db)
        self.payment_repository = RepositoryFactory.create_payment_repository(db)

    # ------------------------------------------------------------------ #
    # Creation and lookup
    # ------------------------------------------------------------------ #

    @BaseService.measure_operation("create_booking")
    def create_booking(
        self,
        *,
        court_id: Any,
        user_id: Any,
        user_email: Any,
        slots: Any,
        date: Any,
        price: Any,
    ) -> Booking:
        """
        Create a booking in status pending / payment_status pending.

        No availability or overlap check is made against other bookings.

        Raises:
            ValidationException: If any field is missing or malformed
        """
        missing = [
            name
            for name, value in (
                ("courtId", court_id),
                ("userId", user_id),
                ("userEmail", user_email),
                ("slots", slots),
                ("date", date),
                ("price", price),
            )
            if value is None or value == "" or value == []
        ]
        if missing:
            raise ValidationException(
                "All fields required and slots must be a non-empty array",
                code="MISSING_FIELDS",
                details={"missing": missing},
            )

        clean_slots = self._validate_slots(slots)

        if not is_ulid(court_id):
            raise ValidationException("Invalid court id", code="INVALID_ID", details={"courtId": court_id})
        if not is_ulid(user_id):
            raise ValidationException("Invalid user id", code="INVALID_ID", details={"userId": user_id})

        booking_date = parse_iso_date(date)
        if booking_date is None:
            raise ValidationException("Invalid booking date", code="INVALID_DATE")

        amount = parse_decimal(price)
        if amount is None or amount <= 0:
            raise ValidationException("Price must be a positive number", code="INVALID_PRICE")

        with self.transaction():
            booking = self.booking_repository.create(
                court_id=court_id.upper(),
                user_id=user_id.upper(),
                user_email=str(user_email).strip(),
                slots=clean_slots,
                booking_date=booking_date,
                price=amount.quantize(Decimal("0.01")),
                status=BookingStatus.PENDING.value,
                payment_status=PaymentStatus.PENDING.value,
            )

        self.logger.info(f"Created booking {booking.id} for court {booking.court_id}")
        return booking

    @staticmethod
    def _validate_slots(slots: Any) -> List[str]:
        if not isinstance(slots, (list, tuple)) or not slots:
            raise ValidationException(
                "All fields required and slots must be a non-empty array", code="INVALID_SLOTS"
            )
        clean: List[str] = []
        for slot in slots:
            if not isinstance(slot, str) or not slot.strip():
                raise ValidationException("Slot labels must be non-empty strings", code="INVALID_SLOTS")
            clean.append(slot.strip())
        return clean

    def get_booking(self, booking_id: str) -> Booking:
        booking = self.booking_repository.get_by_id(booking_id)
        if not booking:
            raise NotFoundException("Booking not found", code="BOOKING_NOT_FOUND")
        return booking

    @BaseService.measure_operation("list_bookings")
    def list_bookings(
        self,
        *,
        status: Optional[str] = None,
        payment_status: Optional[str] = None,
        court_name: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """List bookings with user and court names, newest first."""
        return self.booking_repository.list_enriched(
            status=status,
            payment_status=payment_status,
            court_name=court_name,
            user_id=user_id,
        )

    @BaseService.measure_operation("delete_booking")
    def delete_booking(self, booking_id: str) -> None:
        with self.transaction():
            deleted = self.booking_repository.delete(booking_id)
        if not deleted:
            raise NotFoundException("Booking not found", code="BOOKING_NOT_FOUND")
        self.logger.info(f"Deleted booking {booking_id}")

    # ------------------------------------------------------------------ #
    # Administrative decision
    # ------------------------------------------------------------------ #

    @BaseService.measure_operation("set_booking_status")
    def set_booking_status(
        self,
        booking_id: str,
        status: Any,
        *,
        user_email: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> Booking:
        """
        Approve or reject a booking.

        Approval promotes the booking's user to member. The promotion runs
        after the status change is committed and is best-effort: when no
        email resolves or no user matches, it is logged and skipped.

        Raises:
            ValidationException: If status is not Approved or Rejected
            NotFoundException: If the booking does not exist
        """
        if status not in {s.value for s in ADMIN_DECISION_STATUSES}:
            raise ValidationException("Invalid status", code="INVALID_STATUS", details={"status": status})

        with self.transaction():
            booking = self.booking_repository.get_for_update(booking_id)
            if not booking:
                raise NotFoundException("Booking not found", code="BOOKING_NOT_FOUND")
            booking.status = status
            self.booking_repository.flush()

        self.logger.info(f"Booking {booking_id} set to {status}")

        if status == BookingStatus.APPROVED.value:
            self._promote_to_member(
                booking,
                supplied_email=user_email,
                supplied_user_id=user_id,
            )
        return booking

    def _resolve_promotion_email(
        self,
        booking: Booking,
        supplied_email: Optional[str],
        supplied_user_id: Optional[str],
    ) -> Optional[str]:
        if supplied_email:
            return supplied_email
        if booking.user_email:
            return booking.user_email
        user = self.user_repository.get_by_id(supplied_user_id or booking.user_id)
        return user.email if user else None

    def _promote_to_member(
        self,
        booking: Booking,
        *,
        supplied_email: Optional[str],
        supplied_user_id: Optional[str],
    ) -> None:
        try:
            with self.transaction():
                email = self._resolve_promotion_email(booking, supplied_email, supplied_user_id)
                if not email:
                    self.logger.warning(
                        f"No email resolved for booking {booking.id}; skipping member promotion"
                    )
                    return
                if not self.user_repository.set_role_by_email(email, RoleName.MEMBER.value):
                    self.logger.warning(
                        f"No user with email {email}; skipping member promotion"
                    )
                    return
            self.logger.info(f"Promoted {email} to member after approval of {booking.id}")
        except ServiceException as e:
            self.logger.error(f"Member promotion failed for booking {booking.id}: {e.message}")

    # ------------------------------------------------------------------ #
    # Payment status paths
    # ------------------------------------------------------------------ #

    @BaseService.measure_operation("update_payment_status")
    def update_payment_status(self, booking_id: str, payment_status: Any) -> Booking:
        """
        Administrative payment status override.

        Re-applying the current status is a no-op; a change that would move
        the status backwards is refused. Not authoritative: a booking marked
        completed here is flagged as admin-confirmed and is not expected to
        carry a payment record.
        """
        if payment_status not in OVERRIDE_PAYMENT_STATUSES:
            raise ValidationException(
                "Invalid payment status",
                code="INVALID_PAYMENT_STATUS",
                details={"paymentStatus": payment_status},
            )

        with self.transaction():
            booking = self.booking_repository.get_for_update(booking_id)
            if not booking:
                raise NotFoundException("Booking not found", code="BOOKING_NOT_FOUND")

            if PAYMENT_STATUS_RANK[payment_status] < PAYMENT_STATUS_RANK[booking.payment_status]:
                raise ValidationException(
                    "Payment status cannot move backwards",
                    code="PAYMENT_STATUS_REGRESSION",
                    details={"current": booking.payment_status, "requested": payment_status},
                )
            if (
                payment_status == PaymentStatus.COMPLETED.value
                and booking.payment_status != PaymentStatus.COMPLETED.value
            ):
                booking.confirmed_by = PaymentConfirmation.ADMIN.value
            booking.payment_status = join_payment_status(booking.payment_status, payment_status)
            self.booking_repository.flush()

        return booking

    @BaseService.measure_operation("record_client_payment")
    def record_client_payment(self, booking_id: Any, transaction_id: Any) -> Booking:
        """
        Apply the client's payment success callback.

        Moves payment_status toward ``paid`` without lowering ``completed``
        and stamps transaction_id / paid_at (last writer wins). This report
        is not authoritative; only the gateway webhook confirms a booking.
        """
        if not booking_id:
            raise ValidationException("Booking ID is required", code="MISSING_BOOKING_ID")

        with self.transaction():
            booking = self.booking_repository.get_for_update(str(booking_id))
            if not booking:
                raise NotFoundException("Booking not found", code="BOOKING_NOT_FOUND")
            booking.payment_status = join_payment_status(
                booking.payment_status, PaymentStatus.PAID.value
            )
            booking.transaction_id = str(transaction_id) if transaction_id else None
            booking.paid_at = datetime.now(timezone.utc)
            self.booking_repository.flush()

        self.logger.info(f"Client reported payment for booking {booking.id}")
        return booking

    @BaseService.measure_operation("apply_payment_succeeded")
    def apply_payment_succeeded(
        self,
        booking_id: str,
        *,
        transaction_id: str,
        amount_cents: int,
        currency: str,
        gateway_status: str,
    ) -> Booking:
        """
        Apply a gateway-confirmed payment.

        The booking update and the payment record insert share one
        transaction. A redelivery of the same transaction finds the existing
        record and inserts nothing; the booking is left completed/Confirmed.

        Raises:
            NotFoundException: If the booking does not exist
            ServiceException: If the store fails (everything is rolled back)
        """
        with self.transaction():
            booking = self.booking_repository.get_for_update(booking_id)
            if not booking:
                raise NotFoundException("Booking not found", code="BOOKING_NOT_FOUND")

            booking.payment_status = join_payment_status(
                booking.payment_status, PaymentStatus.COMPLETED.value
            )
            booking.status = BookingStatus.CONFIRMED.value
            booking.confirmed_by = PaymentConfirmation.GATEWAY.value

            existing = self.payment_repository.get_by_transaction_id(transaction_id)
            if existing:
                self.logger.info(
                    f"Payment {transaction_id} already recorded for booking {existing.booking_id}"
                )
            else:
                self.payment_repository.create_payment_record(
                    booking_id=booking.id,
                    transaction_id=transaction_id,
                    amount=Decimal(amount_cents) / Decimal(100),
                    currency=currency,
                    status=gateway_status,
                )
            self.booking_repository.flush()

        self.logger.info(f"Booking {booking_id} confirmed by payment {transaction_id}")
        return booking

    def find_completed_without_record(self) -> Sequence[Booking]:
        return self.booking_repository.find_completed_without_payment_record()
