"""PostgreSQL implementation of GameSession repository."""

from typing import Any, List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cfh.domain.model import GameSession
from cfh.domain.repository import GameSessionRepository
from cfh.domain.value import GameSessionId, UserId
from cfh.persistence.mappers import game_session_to_dict, row_to_game_session
from cfh.persistence.tables import game_sessions_table


class PostgresGameSessionRepository(GameSessionRepository):
    """PostgreSQL implementation of GameSessionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, session_id: GameSessionId) -> Optional[GameSession]:
        """Find a game session by ID."""
        stmt = select(game_sessions_table).where(game_sessions_table.c.id == session_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_game_session(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId, limit: int = 10) -> List[GameSession]:
        """Find a user's sessions, newest first."""
        stmt = (
            select(game_sessions_table)
            .where(game_sessions_table.c.user_id == user_id)
            .order_by(
                game_sessions_table.c.created_at.desc(),
                game_sessions_table.c.id.desc(),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_game_session(row._asdict()) for row in result.fetchall()]

    async def create(
        self,
        user_id: UserId,
        score: Optional[int] = None,
        sanity_left: Optional[int] = None,
        choices: Optional[list[Any]] = None,
    ) -> GameSession:
        """Insert a session and return it with its serial ID."""
        stmt = (
            insert(game_sessions_table)
            .values(
                user_id=user_id,
                score=score,
                sanity_left=sanity_left,
                choices=choices or [],
            )
            .returning(*game_sessions_table.c)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_game_session(result.one()._asdict())

    async def save(self, session: GameSession) -> GameSession:
        """Update an existing session."""
        session_dict = game_session_to_dict(session)
        session_dict.pop("id")
        session_dict.pop("created_at")
        stmt = (
            update(game_sessions_table)
            .where(game_sessions_table.c.id == session.id)
            .values(**session_dict)
            .returning(*game_sessions_table.c)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_game_session(result.one()._asdict())
