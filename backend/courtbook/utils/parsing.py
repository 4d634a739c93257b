"""Lenient parsers for loosely-typed request fields."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
import re
from typing import Any, List, Optional

from ..core.constants import ULID_PATTERN

_ULID_RE = re.compile(ULID_PATTERN)


def parse_decimal(value: Any) -> Optional[Decimal]:
    """Parse ``value`` as a finite decimal; None when it is not a number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not parsed.is_finite():
        return None
    return parsed


def parse_iso_date(value: Any) -> Optional[date]:
    """Accept an ISO date or datetime (truncated to its date)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def is_ulid(value: Any) -> bool:
    return isinstance(value, str) and bool(_ULID_RE.match(value.upper()))


def normalize_id(value: Any) -> Optional[str]:
    """ULIDs are case-insensitive; ids are stored upper-case."""
    if value is None:
        return None
    return str(value).strip().upper()


def split_slots(value: Any) -> List[str]:
    """Accept a list of labels or a comma separated string."""
    if isinstance(value, str):
        return [slot.strip() for slot in value.split(",") if slot.strip()]
    if isinstance(value, (list, tuple)):
        return [str(slot).strip() for slot in value if str(slot).strip()]
    return []
