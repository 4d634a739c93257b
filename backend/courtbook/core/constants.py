"""Application-wide constants for the Courtbook API."""

API_TITLE = "Courtbook API"
API_DESCRIPTION = "Sports club court booking backend with Stripe payment confirmation"
API_VERSION = "1.0.0"
ROOT_MESSAGE = "Courtbook API Running"

# Stripe rejects charges below 50 minor units
MIN_CHARGE_CENTS = 50

# Stripe event that confirms a booking payment
PAYMENT_SUCCEEDED_EVENT = "payment_intent.succeeded"

# Metadata key carrying the booking id on payment intents
BOOKING_METADATA_KEY = "bookingId"

# Fallback announcement author when the session carries no email
DEFAULT_ANNOUNCEMENT_AUTHOR = "admin@example.com"

ULID_PATTERN = r"^[0-9A-HJKMNP-TV-Z]{26}$"
