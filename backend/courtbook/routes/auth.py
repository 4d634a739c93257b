# backend/courtbook/routes/auth.py
"""Session routes: issue and clear the session cookie."""

import logging

from fastapi import APIRouter, Response

from ..auth import create_access_token
from ..core.config import settings
from ..core.exceptions import ValidationException
from ..schemas.common import MessageResponse, SessionRequest, SessionResponse
from ..utils.cookies import clear_session_cookie, set_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/jwt", response_model=SessionResponse)
def issue_session(payload: SessionRequest, response: Response) -> SessionResponse:
    """Issue a session token for ``email`` as an HTTP-only cookie."""
    if not payload.email:
        raise ValidationException("Email is required", code="MISSING_EMAIL")

    token = create_access_token({"email": payload.email})
    set_session_cookie(response, token, max_age=settings.session_token_expire_minutes * 60)
    logger.info(f"Session issued for {payload.email}")
    return SessionResponse()


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response) -> MessageResponse:
    clear_session_cookie(response)
    return MessageResponse(message="Logged out successfully")
