"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .game_session import InMemoryGameSessionRepository
from .meme import InMemoryMemeRepository
from .newsletter import InMemoryNewsletterRepository
from .resource import InMemoryResourceRepository
from .store import InMemoryStore
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryGameSessionRepository",
    "InMemoryMemeRepository",
    "InMemoryNewsletterRepository",
    "InMemoryResourceRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
