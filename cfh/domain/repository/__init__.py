"""Repository interfaces for the domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from cfh.domain.repository.comment import CommentRepository
from cfh.domain.repository.game_session import GameSessionRepository
from cfh.domain.repository.meme import MemeRepository
from cfh.domain.repository.newsletter import NewsletterRepository
from cfh.domain.repository.resource import ResourceRepository
from cfh.domain.repository.unit_of_work import UnitOfWork
from cfh.domain.repository.user import UserRepository
from cfh.domain.repository.votable import VotableRepository
from cfh.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "MemeRepository",
    "CommentRepository",
    "ResourceRepository",
    "GameSessionRepository",
    "NewsletterRepository",
    "VotableRepository",
    "VoteRepository",
    "UnitOfWork",
]
