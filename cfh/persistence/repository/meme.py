"""PostgreSQL implementation of Meme repository."""

from typing import List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cfh.domain.model import Meme
from cfh.domain.repository import MemeRepository
from cfh.domain.value import CounterDelta, UserId
from cfh.persistence.mappers import row_to_meme
from cfh.persistence.tables import memes_table


class PostgresMemeRepository(MemeRepository):
    """PostgreSQL implementation of MemeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, entity_id: int, for_update: bool = False) -> Optional[Meme]:
        """Find a meme by ID, optionally locking its row."""
        stmt = select(memes_table).where(memes_table.c.id == entity_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_meme(row._asdict()) if row else None

    async def find_all(self) -> List[Meme]:
        """Find all memes in ID order."""
        stmt = select(memes_table).order_by(memes_table.c.id)
        result = await self.session.execute(stmt)
        return [row_to_meme(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, author_id: UserId) -> List[Meme]:
        """Find an author's memes in ID order."""
        stmt = (
            select(memes_table)
            .where(memes_table.c.author_id == author_id)
            .order_by(memes_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_meme(row._asdict()) for row in result.fetchall()]

    async def create(
        self, author_id: UserId, image_url: str, caption: Optional[str] = None
    ) -> Meme:
        """Insert a meme and return it with its serial ID."""
        stmt = (
            insert(memes_table)
            .values(author_id=author_id, image_url=image_url, caption=caption)
            .returning(*memes_table.c)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_meme(result.one()._asdict())

    async def apply_vote_delta(self, entity_id: int, delta: CounterDelta) -> None:
        """Atomically add a delta to upvotes and downvotes."""
        stmt = (
            update(memes_table)
            .where(memes_table.c.id == entity_id)
            .values(
                upvotes=memes_table.c.upvotes + delta.upvotes,
                downvotes=memes_table.c.downvotes + delta.downvotes,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
