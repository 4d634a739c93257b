# backend/tests/conftest.py
"""
Pytest configuration for the Courtbook API.

Environment is set BEFORE any courtbook import so settings never read a
developer .env for secrets or the store URL. Every test gets a fresh
in-memory SQLite store and a gateway whose webhook verification is the
real Stripe check, with payment intent creation recorded instead of sent.
"""

import os

# CRITICAL: Set test configuration BEFORE any app imports!
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["STRIPE_WEBHOOK_SECRET"] = "whsec_test_secret"
os.environ["STRIPE_SECRET_KEY"] = ""
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "true"

from datetime import date
from typing import Any, Callable, Dict, Iterator

from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest
from sqlalchemy.orm import Session

from courtbook.auth import create_access_token
from courtbook.core.config import settings
from courtbook.database import Database
from courtbook.main import create_app
from courtbook.models.booking import Booking
from courtbook.models.court import Court
from courtbook.models.user import User
from courtbook.models.types import new_id
from tests.helpers.payments import FakeStripeGateway

ADMIN_EMAIL = "admin@club.test"


@pytest.fixture
def database() -> Iterator[Database]:
    db = Database("sqlite://")
    db.create_tables()
    yield db
    db.dispose()


@pytest.fixture
def db(database: Database) -> Iterator[Session]:
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def gateway() -> FakeStripeGateway:
    return FakeStripeGateway()


@pytest.fixture
def app(database: Database, gateway: FakeStripeGateway) -> FastAPI:
    return create_app(database=database, payment_gateway=gateway)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_client(app: FastAPI) -> Iterator[TestClient]:
    """Client carrying a valid session cookie for ADMIN_EMAIL."""
    with TestClient(app) as test_client:
        test_client.cookies.set(
            settings.session_cookie_name, create_access_token({"email": ADMIN_EMAIL})
        )
        yield test_client


@pytest.fixture
def test_user(db: Session) -> User:
    user = User(email="player@club.test", name="Pat Player", role="user")
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def test_court(db: Session) -> Court:
    court = Court(
        name="Center Court",
        type="Tennis",
        price=25,
        image="https://img.test/center.png",
        available_slots=["08:00-09:00", "09:00-10:00"],
    )
    db.add(court)
    db.commit()
    return court


@pytest.fixture
def make_booking(db: Session, test_user: User, test_court: Court) -> Callable[..., Booking]:
    def _make(**overrides: Any) -> Booking:
        values: Dict[str, Any] = {
            "court_id": test_court.id,
            "user_id": test_user.id,
            "user_email": test_user.email,
            "slots": ["08:00-09:00"],
            "booking_date": date(2025, 7, 1),
            "price": 25,
            "status": "pending",
            "payment_status": "pending",
        }
        values.update(overrides)
        booking = Booking(**values)
        db.add(booking)
        db.commit()
        return booking

    return _make


@pytest.fixture
def unknown_id() -> str:
    return new_id()
