"""In-memory user repository for testing."""

from datetime import datetime
from typing import List, Optional, Sequence

from cfh.domain.model import User
from cfh.domain.repository import UserRepository
from cfh.domain.value import UserId
from cfh.domain.value.types import Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self.store.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once."""
        return [self.store.users[i] for i in user_ids if i in self.store.users]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        for user in self.store.users.values():
            if user.email == email:
                return user
        return None

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        for user in self.store.users.values():
            if user.username.root == username:
                return user
        return None

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
        """Create a user with the next ID."""
        user = User(
            id=UserId(self.store.next_id("user")),
            email=email,
            username=Username(username),
            password_hash=password_hash,
            display_name=display_name,
            avatar=avatar,
            provider=provider,
            provider_id=provider_id,
        )
        self.store.users[user.id] = user
        return user

    async def save(self, user: User) -> User:
        """Replace a stored user."""
        saved = user.model_copy(update={"updated_at": datetime.now()})
        self.store.users[saved.id] = saved
        return saved
