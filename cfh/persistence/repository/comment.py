"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cfh.domain.model import Comment
from cfh.domain.repository import CommentRepository
from cfh.domain.value import CommentId, CounterDelta, MemeId, UserId
from cfh.persistence.mappers import row_to_comment
from cfh.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, entity_id: int, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID, optionally locking its row."""
        stmt = select(comments_table).where(comments_table.c.id == entity_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_meme(self, meme_id: MemeId) -> List[Comment]:
        """Find comments on a meme, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.meme_id == meme_id)
            .order_by(comments_table.c.created_at.desc(), comments_table.c.id.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def create(
        self,
        meme_id: MemeId,
        author_id: UserId,
        body: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a comment and return it with its serial ID."""
        stmt = (
            insert(comments_table)
            .values(
                meme_id=meme_id, author_id=author_id, body=body, parent_id=parent_id
            )
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_comment(result.one()._asdict())

    async def apply_vote_delta(self, entity_id: int, delta: CounterDelta) -> None:
        """Atomically add a delta to upvotes."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == entity_id)
            .values(upvotes=comments_table.c.upvotes + delta.upvotes)
        )
        await self.session.execute(stmt)
        await self.session.flush()
