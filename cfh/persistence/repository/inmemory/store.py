"""In-memory content store.

One ``InMemoryStore`` holds every table of a running application. It is
created once per DI container and shared by the request-scoped in-memory
repositories, so data lives as long as the container does.
"""

import itertools
from datetime import datetime
from typing import Iterator

from cfh.domain.model import Comment, GameSession, Meme, Resource, User, Vote
from cfh.domain.value import (
    CommentId,
    GameSessionId,
    MemeId,
    ResourceId,
    UserId,
    VoteKey,
)
from cfh.persistence.seed import STARTER_RESOURCES


class InMemoryStore:
    """Process-local maps keyed by identity plus per-kind ID counters."""

    def __init__(self, seed: bool = True) -> None:
        self.users: dict[UserId, User] = {}
        self.memes: dict[MemeId, Meme] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.resources: dict[ResourceId, Resource] = {}
        self.game_sessions: dict[GameSessionId, GameSession] = {}
        self.votes: dict[VoteKey, Vote] = {}
        # Dicts keep insertion order, used as an ordered set
        self.subscribers: dict[str, datetime] = {}

        self._counters: dict[str, Iterator[int]] = {}

        if seed:
            self._seed_resources()

    def next_id(self, kind: str) -> int:
        """Next identity for a kind, starting at 1."""
        counter = self._counters.setdefault(kind, itertools.count(1))
        return next(counter)

    def _seed_resources(self) -> None:
        for data in STARTER_RESOURCES:
            resource_id = ResourceId(self.next_id("resource"))
            self.resources[resource_id] = Resource(id=resource_id, **data)
