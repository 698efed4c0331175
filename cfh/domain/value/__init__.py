"""Domain value objects."""

from cfh.domain.value.identifiers import (
    CommentId,
    GameSessionId,
    MemeId,
    ResourceId,
    UserId,
)
from cfh.domain.value.types import (
    CounterDelta,
    EmailAddress,
    FeedSort,
    Username,
    VotableType,
    VoteDirection,
    VoteKey,
    VoteTransition,
)

__all__ = [
    # Identifiers
    "UserId",
    "MemeId",
    "CommentId",
    "ResourceId",
    "GameSessionId",
    # Types
    "CounterDelta",
    "EmailAddress",
    "FeedSort",
    "Username",
    "VotableType",
    "VoteDirection",
    "VoteKey",
    "VoteTransition",
]
