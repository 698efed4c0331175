"""Unit tests for JWT helpers."""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from cfh.config import AuthSettings
from cfh.util.jwt import JWTError, create_token, verify_token


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret="test-secret")


class TestJWT:
    """Tests for token creation and verification."""

    def test_round_trip(self, auth_settings):
        token = create_token(7, "designer", "d@example.com", auth_settings)

        payload = verify_token(token, auth_settings)

        assert payload.user_id == 7
        assert payload.username == "designer"
        assert payload.email == "d@example.com"

    def test_expiry_is_configured_days_ahead(self, auth_settings):
        before = datetime.now(timezone.utc)

        payload = verify_token(
            create_token(1, "a_user", "a@example.com", auth_settings), auth_settings
        )

        expected = before + timedelta(days=auth_settings.jwt_expiry_days)
        assert abs((payload.exp - expected).total_seconds()) < 5

    def test_wrong_secret_rejected(self, auth_settings):
        token = create_token(1, "a_user", "a@example.com", auth_settings)

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, AuthSettings(jwt_secret="other-secret"))

    def test_expired_token_rejected(self, auth_settings):
        token = pyjwt.encode(
            {
                "user_id": 1,
                "username": "a_user",
                "email": "a@example.com",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, auth_settings)
