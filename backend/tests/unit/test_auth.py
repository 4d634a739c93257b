# backend/tests/unit/test_auth.py
from datetime import timedelta

import jwt
import pytest

from courtbook.auth import create_access_token, decode_access_token
from courtbook.core.config import settings
from courtbook.core.exceptions import UnauthorizedException


def test_token_carries_email_and_expiry():
    token = create_access_token({"email": "a@club.test"})

    payload = decode_access_token(token)

    assert payload["email"] == "a@club.test"
    assert "exp" in payload


def test_expired_token_is_rejected():
    token = create_access_token({"email": "a@club.test"}, expires_delta=timedelta(seconds=-1))

    with pytest.raises(UnauthorizedException):
        decode_access_token(token)


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"email": "a@club.test"}, "some-other-key", algorithm=settings.algorithm)

    with pytest.raises(UnauthorizedException):
        decode_access_token(token)


def test_garbage_token_is_rejected():
    with pytest.raises(UnauthorizedException):
        decode_access_token("not.a.token")


def test_default_lifetime_is_two_hours():
    assert settings.session_token_expire_minutes == 120
