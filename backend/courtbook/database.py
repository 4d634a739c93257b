# backend/courtbook/database.py
from datetime import datetime
import logging
from typing import Any, Dict, Generator, Optional

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def _engine_options(url: str) -> Dict[str, Any]:
    if url.startswith("sqlite"):
        options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url.rstrip("/") == "sqlite:":
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_size": 10,  # Number of persistent connections
        "max_overflow": 10,  # Maximum overflow connections
        "pool_timeout": 30,  # Timeout for getting connection
        "pool_recycle": 3600,  # Recycle connections after 1 hour
        "pool_pre_ping": True,  # Test connections before using
        "connect_args": {"connect_timeout": 10, "application_name": "courtbook_backend"},
    }


class Database:
    """
    Store handle owned by the application lifespan.

    Built once at startup, injected into request handlers through
    ``get_db`` and disposed on shutdown.
    """

    def __init__(self, url: str, engine: Optional[Engine] = None) -> None:
        self.url = url
        self.engine: Engine = engine or create_engine(url, **_engine_options(url))
        self.session_factory = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine, expire_on_commit=False
        )
        event.listen(self.engine, "connect", _on_connect)

    def connect(self) -> None:
        """Verify the store is reachable; raises if it is not."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection verified")

    def create_tables(self) -> None:
        # Import models so they register on Base.metadata
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections released")


def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
    connection_record.info["connect_time"] = datetime.now()
    logger.debug("Database connection established")


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """Get database session with proper cleanup."""
    db = get_database(request).session()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
