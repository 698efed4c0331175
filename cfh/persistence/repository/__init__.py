"""PostgreSQL repository implementations."""

from cfh.persistence.repository.comment import PostgresCommentRepository
from cfh.persistence.repository.game_session import PostgresGameSessionRepository
from cfh.persistence.repository.meme import PostgresMemeRepository
from cfh.persistence.repository.newsletter import PostgresNewsletterRepository
from cfh.persistence.repository.resource import PostgresResourceRepository
from cfh.persistence.repository.unit_of_work import PostgresUnitOfWork
from cfh.persistence.repository.user import PostgresUserRepository
from cfh.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresMemeRepository",
    "PostgresCommentRepository",
    "PostgresResourceRepository",
    "PostgresGameSessionRepository",
    "PostgresNewsletterRepository",
    "PostgresVoteRepository",
    "PostgresUnitOfWork",
]
