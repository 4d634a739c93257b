"""Cookie utilities for consistent session handling."""
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Response

from ..core.config import settings


def _session_cookie_attributes() -> Dict[str, Any]:
    # Cross-site (SameSite=None) cookies must be Secure; both follow the environment
    return {
        "httponly": True,
        "samesite": settings.session_cookie_samesite,
        "secure": bool(settings.session_cookie_secure),
        "path": "/",
    }


def set_session_cookie(
    response: Response,
    value: str,
    *,
    name: Optional[str] = None,
    max_age: Optional[int] = None,
) -> str:
    """Set the HTTP-only session cookie.

    Args:
        response: FastAPI response instance.
        value: Signed session token.
        name: Cookie name; defaults to the configured session cookie name.
        max_age: Optional ``Max-Age`` to set.

    Returns:
        The cookie name written to the response headers.
    """
    cookie_name = name or settings.session_cookie_name
    cookie_kwargs = {"key": cookie_name, "value": value, **_session_cookie_attributes()}
    if max_age is not None:
        cookie_kwargs["max_age"] = max_age

    response.set_cookie(**cookie_kwargs)
    return cookie_name


def clear_session_cookie(response: Response, name: Optional[str] = None) -> None:
    """Expire the session cookie using the same attributes it was set with."""
    response.delete_cookie(key=name or settings.session_cookie_name, **_session_cookie_attributes())
