# backend/scripts/audit_payments.py

"""
Payment reconciliation audit.

Lists bookings the gateway confirmed (payment_status=completed) that have
no payment record. Exits non-zero when any are found so it can gate a
cron job or CI step.

Usage: python scripts/audit_payments.py
"""

import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from courtbook.core.config import settings  # noqa: E402
from courtbook.database import Database  # noqa: E402
from courtbook.services.booking_service import BookingService  # noqa: E402


def main() -> int:
    database = Database(settings.database_url)
    db = database.session()
    try:
        bookings = BookingService(db).find_completed_without_record()
    finally:
        db.close()
        database.dispose()

    print("=" * 80)
    print("PAYMENT RECONCILIATION AUDIT")
    print("=" * 80)

    if not bookings:
        print("✅ Every completed booking has a payment record")
        return 0

    print(f"⚠️  {len(bookings)} completed booking(s) without a payment record:\n")
    for booking in bookings:
        print(
            f"  - {booking.id}  {booking.user_email:<30} {booking.booking_date}  "
            f"price={booking.price}  transaction={booking.transaction_id or '-'}"
        )
    return 1


if __name__ == "__main__":
    sys.exit(main())
