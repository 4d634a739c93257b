# backend/courtbook/main.py
"""
Courtbook API application.

``create_app`` assembles the FastAPI app; the module-level ``app`` is what
uvicorn serves. The store handle and the payment gateway are built in the
lifespan (or injected, in tests) and kept on ``app.state``.
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator, Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import is_running_tests, settings
from .core.constants import API_DESCRIPTION, API_TITLE, API_VERSION
from .database import Database
from .errors import register_error_handlers
from .integrations.stripe_gateway import PaymentGateway, StripeGateway
from .routes import (
    announcements,
    auth,
    bookings,
    coupons,
    courts,
    health,
    payments,
    stripe_webhooks,
    users,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup/shutdown."""
    logger.info(f"{API_TITLE} starting up...")
    logger.info(f"Environment: {settings.environment}")
    if is_running_tests():
        logger.info("Running under pytest (test mode active)")

    owns_database = getattr(app.state, "database", None) is None
    if owns_database:
        app.state.database = Database(settings.database_url)
    database: Database = app.state.database

    # An unreachable store is fatal at startup
    database.connect()
    if settings.auto_create_tables:
        database.create_tables()

    if getattr(app.state, "payment_gateway", None) is None:
        app.state.payment_gateway = StripeGateway()

    yield

    logger.info(f"{API_TITLE} shutting down...")
    if owns_database:
        database.dispose()


def create_app(
    database: Optional[Database] = None,
    payment_gateway: Optional[PaymentGateway] = None,
) -> FastAPI:
    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        lifespan=app_lifespan,
    )
    app.state.database = database
    app.state.payment_gateway = payment_gateway

    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "OPTIONS", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    logger.info("CORS allow_origins=%s allow_credentials=%s", settings.cors_origins, True)

    api_v1 = APIRouter(prefix="/api/v1")
    # Webhook first: its handler must see the raw body before any other route matches
    api_v1.include_router(stripe_webhooks.router)
    api_v1.include_router(auth.router)
    api_v1.include_router(courts.router)
    api_v1.include_router(bookings.router)
    api_v1.include_router(users.router)
    api_v1.include_router(coupons.router)
    api_v1.include_router(announcements.router)
    api_v1.include_router(payments.router)

    app.include_router(api_v1)
    app.include_router(health.router)
    return app


app = create_app()
