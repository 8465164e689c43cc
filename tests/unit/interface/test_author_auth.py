"""Unit tests for author cookie authentication."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest
from fastapi import HTTPException

from lyra.config import AuthSettings
from lyra.domain.service import JWTService
from lyra.interface.api.auth import authenticate_author

SETTINGS = AuthSettings(jwt_secret="test-secret")


def _token(user_id: str, secret: str = "test-secret", expires_in=timedelta(hours=1)) -> str:
    now = datetime.now(timezone.utc)
    return jwt.encode(
        {"user_id": user_id, "exp": now + expires_in},
        secret,
        algorithm="HS256",
    )


class TestAuthenticateAuthor:
    """Tests for authenticate_author."""

    def test_valid_cookie(self):
        user_id = str(uuid4())
        assert authenticate_author(_token(user_id), JWTService(SETTINGS)) == user_id

    def test_missing_cookie(self):
        with pytest.raises(HTTPException) as exc_info:
            authenticate_author(None, JWTService(SETTINGS))

        assert exc_info.value.status_code == 401

    def test_wrong_secret(self):
        with pytest.raises(HTTPException) as exc_info:
            authenticate_author(_token(str(uuid4()), secret="other"), JWTService(SETTINGS))

        assert exc_info.value.status_code == 401

    def test_expired_cookie(self):
        token = _token(str(uuid4()), expires_in=timedelta(seconds=-10))

        with pytest.raises(HTTPException) as exc_info:
            authenticate_author(token, JWTService(SETTINGS))

        assert exc_info.value.status_code == 401

    def test_subject_must_be_a_user_id(self):
        with pytest.raises(HTTPException) as exc_info:
            authenticate_author(_token("mara"), JWTService(SETTINGS))

        assert exc_info.value.status_code == 401

    def test_token_without_user_id(self):
        token = jwt.encode({"username": "mara"}, "test-secret", algorithm="HS256")

        with pytest.raises(HTTPException) as exc_info:
            authenticate_author(token, JWTService(SETTINGS))

        assert exc_info.value.status_code == 401
