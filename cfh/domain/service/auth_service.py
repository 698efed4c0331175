"""Authentication domain service."""

import re

import logfire

from cfh.config import AuthSettings
from cfh.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    ValidationError,
)
from cfh.domain.model import User
from cfh.domain.value import EmailAddress, Username
from cfh.util.password import hash_password, verify_password

from .base import Service
from .user_service import UserService


def check_password_policy(password: str) -> None:
    """Enforce the password policy.

    8-100 characters with at least one upper-case letter, one lower-case
    letter and one digit.

    Raises:
        ValidationError: If the password is too weak
    """
    if len(password) < 8:
        raise ValidationError("Password must be at least 8 characters long")
    if len(password) > 100:
        raise ValidationError("Password must be at most 100 characters long")
    if not (
        re.search(r"[A-Z]", password)
        and re.search(r"[a-z]", password)
        and re.search(r"\d", password)
    ):
        raise ValidationError(
            "Password must contain at least one uppercase letter, "
            "one lowercase letter, and one number"
        )


class AuthService(Service):
    """Domain service for password authentication."""

    def __init__(self, user_service: UserService, auth_settings: AuthSettings) -> None:
        """Initialize auth service.

        Args:
            user_service: User domain service
            auth_settings: Authentication settings
        """
        self.user_service = user_service
        self.auth_settings = auth_settings

    async def register(
        self, email: EmailAddress, username: Username, password: str
    ) -> User:
        """Register a local account.

        Args:
            email: Normalized email
            username: Validated username
            password: Plain-text password

        Returns:
            Created user

        Raises:
            ValidationError: If the password violates the policy
            BusinessRuleViolationError: If email or username is taken
        """
        with logfire.span("auth_service.register", username=username.root):
            check_password_policy(password)

            if await self.user_service.get_user_by_email(email.root):
                logfire.warn("Registration with used email")
                raise BusinessRuleViolationError("Email already in use")
            if await self.user_service.get_user_by_username(username.root):
                logfire.warn("Registration with taken username", username=username.root)
                raise BusinessRuleViolationError("Username already taken")

            password_hash = hash_password(password, self.auth_settings.bcrypt_rounds)
            return await self.user_service.create_local_user(
                email=email.root, username=username.root, password_hash=password_hash
            )

    async def authenticate(self, username: str, password: str) -> User:
        """Check a username and password.

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: With a message telling what went wrong
        """
        with logfire.span("auth_service.authenticate", username=username):
            user = await self.user_service.get_user_by_username(username)
            if not user:
                logfire.warn("Login with unknown username", username=username)
                raise AuthenticationError("Incorrect username.")
            if not user.password_hash:
                logfire.warn("Password login on social account", user_id=user.id)
                raise AuthenticationError("This account uses social login.")
            if not verify_password(password, user.password_hash):
                logfire.warn("Login with wrong password", user_id=user.id)
                raise AuthenticationError("Incorrect password.")

            logfire.info("User authenticated", user_id=user.id)
            return user
