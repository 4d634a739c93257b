"""Shared column helpers."""

from datetime import datetime, timezone

import ulid


def new_id() -> str:
    return str(ulid.ULID())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
