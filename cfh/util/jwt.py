"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from cfh.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: int
    username: str
    email: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(user_id: int, username: str, email: str, settings: AuthSettings) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        username: Username
        email: User email
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "username": username,
        "email": email,
        "exp": expiry,
    }

    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    return token


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
