"""JWT token domain service."""

from typing import Optional

import logfire

from cfh.config import AuthSettings
from cfh.domain.model import User
from cfh.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create JWT token for user.

        Args:
            user: Authenticated user

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user.id):
            token = create_token(
                user.id, user.username.root, user.email, self.auth_settings
            )
            logfire.info("JWT token created", user_id=user.id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_id_from_token(self, token: Optional[str]) -> Optional[int]:
        """Extract user ID from a token, treating bad tokens as anonymous.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None otherwise
        """
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except JWTError:
            return None
