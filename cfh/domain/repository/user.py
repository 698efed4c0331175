"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from cfh.domain.model.user import User
from cfh.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once (batch query).

        Args:
            user_ids: IDs to look up

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (already normalized to lower case).

        Args:
            email: The user's email

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(
        self,
        email: str,
        username: str,
        password_hash: Optional[str] = None,
        display_name: Optional[str] = None,
        avatar: Optional[str] = None,
        provider: str = "local",
        provider_id: Optional[str] = None,
    ) -> User:
        """Create a user.

        Args:
            email: Normalized email
            username: Unique username
            password_hash: bcrypt hash (None for social accounts)
            display_name: Display name
            avatar: Avatar URL
            provider: Authentication provider name
            provider_id: Provider-specific account ID

        Returns:
            The created user with its identity assigned
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save an existing user.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
