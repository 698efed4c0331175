"""User domain service."""

from typing import Optional, Sequence

import logfire

from cfh.domain.error import NotFoundError
from cfh.domain.model import User
from cfh.domain.repository import UserRepository
from cfh.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Get several users keyed by ID; missing users are simply absent."""
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by (normalized) email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email", email=email):
            return await self.user_repository.find_by_email(email)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Get user by username.

        Args:
            username: Username

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_username", username=username):
            return await self.user_repository.find_by_username(username)

    async def create_local_user(
        self, email: str, username: str, password_hash: str
    ) -> User:
        """Create a user who signs in with a password.

        Args:
            email: Normalized email
            username: Validated username
            password_hash: bcrypt hash

        Returns:
            Created user
        """
        with logfire.span("user_service.create_local_user", username=username):
            user = await self.user_repository.create(
                email=email,
                username=username,
                password_hash=password_hash,
                display_name=username,
            )
            logfire.info("User created", user_id=user.id, username=username)
            return user

    async def save(self, user: User) -> User:
        """Save an existing user.

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span("user_service.save", user_id=user.id):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=saved.id)
            return saved
