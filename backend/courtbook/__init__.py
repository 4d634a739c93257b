"""Courtbook: sports-club court booking API with Stripe payment confirmation."""

__version__ = "1.0.0"
