"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from cfh.domain.model import Vote
from cfh.domain.repository import VoteRepository
from cfh.domain.value import UserId, VotableType, VoteKey
from cfh.persistence.mappers import row_to_vote, vote_to_dict
from cfh.persistence.tables import votes_table


def _key_clause(key: VoteKey):
    return and_(
        votes_table.c.subject_kind == key.subject_kind.value,
        votes_table.c.subject_id == key.subject_id,
        votes_table.c.user_id == key.user_id,
    )


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, key: VoteKey) -> Optional[Vote]:
        """Find the vote stored under a key."""
        stmt = select(votes_table).where(_key_clause(key))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote or overwrite the direction of an existing one."""
        stmt = (
            insert(votes_table)
            .values(**vote_to_dict(vote))
            .on_conflict_do_update(
                constraint="pk_votes",
                set_={"direction": vote.direction.value},
            )
            .returning(*votes_table.c)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_vote(result.one()._asdict())

    async def delete(self, key: VoteKey) -> bool:
        """Delete the vote stored under a key."""
        stmt = delete(votes_table).where(_key_clause(key))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_by_subject(
        self, subject_kind: VotableType, subject_id: int
    ) -> List[Vote]:
        """Find all votes on a subject."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.subject_kind == subject_kind.value,
                votes_table.c.subject_id == subject_id,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_user_and_subjects(
        self,
        user_id: UserId,
        subject_kind: VotableType,
        subject_ids: Sequence[int],
    ) -> List[Vote]:
        """Find a user's votes on multiple subjects (batch query)."""
        if not subject_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.subject_kind == subject_kind.value,
                votes_table.c.subject_id.in_(subject_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]
