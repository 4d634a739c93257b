# backend/courtbook/auth.py
"""
Session tokens for the Courtbook API.

Sessions are HS256 JWTs carrying only an email claim, delivered as an
HTTP-only cookie. There is no refresh or rotation: an expired token means
the client must call ``/jwt`` again.
"""

from datetime import datetime, timedelta, timezone
import logging
from typing import Any, Dict, Optional

from fastapi import Request
import jwt
from jwt import PyJWTError

from .core.config import settings
from .core.exceptions import UnauthorizedException

logger = logging.getLogger(__name__)


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed session token.

    Args:
        data: Claims to encode (at least ``email``)
        expires_delta: Optional lifetime; defaults to the configured session lifetime

    Returns:
        str: Encoded JWT
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.session_token_expire_minutes)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(
        to_encode, settings.secret_key.get_secret_value(), algorithm=settings.algorithm
    )


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and verify a session token.

    Raises:
        UnauthorizedException: If the token is malformed, tampered with or expired
    """
    try:
        payload: Dict[str, Any] = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
        )
    except PyJWTError as e:
        logger.warning(f"Invalid session token: {str(e)}")
        raise UnauthorizedException("Invalid token", code="INVALID_TOKEN") from e
    return payload


def get_current_user(request: Request) -> Dict[str, Any]:
    """
    Dependency that requires a valid session cookie.

    Returns:
        The decoded token claims

    Raises:
        UnauthorizedException: If the cookie is missing or invalid
    """
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        raise UnauthorizedException("No token provided", code="MISSING_TOKEN")
    return decode_access_token(token)
