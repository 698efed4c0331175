"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from cfh.config import Settings
from cfh.domain.repository import (
    CommentRepository,
    GameSessionRepository,
    MemeRepository,
    NewsletterRepository,
    ResourceRepository,
    UnitOfWork,
    UserRepository,
    VoteRepository,
)
from cfh.persistence.database import create_engine, create_session_factory
from cfh.persistence.repository import (
    PostgresCommentRepository,
    PostgresGameSessionRepository,
    PostgresMemeRepository,
    PostgresNewsletterRepository,
    PostgresResourceRepository,
    PostgresUnitOfWork,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from cfh.util.di.base import ProviderBase
from cfh.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. Row locks taken while
        casting a vote are held until then.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_meme_repository(self, session: AsyncSession) -> MemeRepository:
        """Provide Meme repository."""
        return PostgresMemeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_resource_repository(self, session: AsyncSession) -> ResourceRepository:
        """Provide Resource repository."""
        return PostgresResourceRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_game_session_repository(
        self, session: AsyncSession
    ) -> GameSessionRepository:
        """Provide GameSession repository."""
        return PostgresGameSessionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_newsletter_repository(self, session: AsyncSession) -> NewsletterRepository:
        """Provide Newsletter repository."""
        return PostgresNewsletterRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work over the request session."""
        return PostgresUnitOfWork(session)
