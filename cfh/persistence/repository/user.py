"""PostgreSQL implementation of User repository."""

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cfh.domain.model import User
from cfh.domain.repository import UserRepository
from cfh.domain.value import UserId
from cfh.persistence.mappers import row_to_user, user_to_dict
from cfh.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

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
        """Insert a user and return it with its serial ID."""
        stmt = (
            insert(users_table)
            .values(
                email=email,
                username=username,
                password_hash=password_hash,
                display_name=display_name,
                avatar=avatar,
                provider=provider,
                provider_id=provider_id,
            )
            .returning(*users_table.c)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_user(result.one()._asdict())

    async def save(self, user: User) -> User:
        """Update an existing user."""
        user_dict = user_to_dict(user)
        user_dict.pop("id")
        user_dict.pop("created_at")
        user_dict["updated_at"] = datetime.now(timezone.utc)
        stmt = (
            update(users_table)
            .where(users_table.c.id == user.id)
            .values(**user_dict)
            .returning(*users_table.c)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_user(result.one()._asdict())
