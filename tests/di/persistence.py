"""Mock persistence providers for testing."""

from dishka import Scope, provide

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
from cfh.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryGameSessionRepository,
    InMemoryMemeRepository,
    InMemoryNewsletterRepository,
    InMemoryResourceRepository,
    InMemoryStore,
    InMemoryUnitOfWork,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from cfh.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store lives as long as the container, so each test that builds its
    own container starts from a fresh store (seeded with the starter
    resources). Repositories are request-scoped views onto that store.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_meme_repository(self, store: InMemoryStore) -> MemeRepository:
        """Provide in-memory meme repository."""
        return InMemoryMemeRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_resource_repository(self, store: InMemoryStore) -> ResourceRepository:
        """Provide in-memory resource repository."""
        return InMemoryResourceRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_game_session_repository(
        self, store: InMemoryStore
    ) -> GameSessionRepository:
        """Provide in-memory game session repository."""
        return InMemoryGameSessionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, store: InMemoryStore) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_newsletter_repository(self, store: InMemoryStore) -> NewsletterRepository:
        """Provide in-memory newsletter repository."""
        return InMemoryNewsletterRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self) -> UnitOfWork:
        """Provide in-memory unit of work."""
        return InMemoryUnitOfWork()
