"""Vote domain service."""

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Union

import logfire

from cfh.domain.error import NotFoundError
from cfh.domain.model import Comment, Meme, Resource
from cfh.domain.value import UserId, VotableType, VoteDirection, VoteTransition

from .base import Service
from .score_aggregator import ScoreAggregator
from .user_service import UserService
from .vote_ledger import VoteLedger

VotableEntity = Union[Meme, Comment, Resource]


class SubjectLockRegistry:
    """Hands out one asyncio lock per voted subject.

    Lives for the whole application so concurrent requests on the same
    subject serialize, while different subjects proceed in parallel. A
    lock is dropped as soon as nobody holds it or waits on it.
    """

    def __init__(self) -> None:
        self._locks: dict[tuple[VotableType, int], asyncio.Lock] = {}
        self._users: dict[tuple[VotableType, int], int] = {}

    def __len__(self) -> int:
        return len(self._locks)

    @asynccontextmanager
    async def hold(
        self, subject_kind: VotableType, subject_id: int
    ) -> AsyncIterator[None]:
        """Hold the lock guarding a subject for the duration of the block."""
        key = (subject_kind, subject_id)
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if not self._users[key]:
                del self._users[key]
                del self._locks[key]


@dataclass
class VoteOutcome:
    """Result of casting a vote."""

    subject_kind: VotableType
    subject: VotableEntity  # Re-read after the counters changed
    transition: VoteTransition


class VoteService(Service):
    """Domain service for vote operations.

    Ties the ledger and the aggregator together so that reading the prior
    vote, recording the new one and updating counters happen as one unit.
    """

    def __init__(
        self,
        vote_ledger: VoteLedger,
        score_aggregator: ScoreAggregator,
        user_service: UserService,
        lock_registry: SubjectLockRegistry,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_ledger: Vote ledger
            score_aggregator: Score aggregator
            user_service: User domain service
            lock_registry: Application-wide subject locks
        """
        self.vote_ledger = vote_ledger
        self.score_aggregator = score_aggregator
        self.user_service = user_service
        self.lock_registry = lock_registry

    async def cast_vote(
        self,
        subject_kind: VotableType,
        subject_id: int,
        user_id: UserId,
        direction: VoteDirection,
    ) -> VoteOutcome:
        """Cast, switch or withdraw a vote.

        Args:
            subject_kind: Kind of subject
            subject_id: Subject ID
            user_id: Voting user
            direction: Requested direction

        Returns:
            The updated subject and the ledger transition

        Raises:
            InvalidDirectionError: If the direction is illegal for the kind
            NotFoundError: If the user or the subject does not exist
        """
        with logfire.span(
            "vote_service.cast_vote",
            subject_kind=subject_kind.value,
            subject_id=subject_id,
            user_id=user_id,
            direction=direction.value,
        ):
            self.vote_ledger.check_direction(subject_kind, direction)
            await self.user_service.get_by_id(user_id)

            repository = self.score_aggregator.repository_for(subject_kind)

            async with self.lock_registry.hold(subject_kind, subject_id):
                # Existence is checked before the ledger is touched
                subject = await repository.find_by_id(subject_id, for_update=True)
                if subject is None:
                    logfire.warn(
                        "Vote on non-existent subject",
                        subject_kind=subject_kind.value,
                        subject_id=subject_id,
                    )
                    raise NotFoundError(subject_kind.value.capitalize(), str(subject_id))

                transition = await self.vote_ledger.apply_vote(
                    subject_kind, subject_id, user_id, direction
                )
                await self.score_aggregator.apply(subject_kind, subject_id, transition)

                updated = await repository.find_by_id(subject_id)
                if updated is None:
                    raise NotFoundError(subject_kind.value.capitalize(), str(subject_id))

            logfire.info("Vote cast", transition=str(transition))
            return VoteOutcome(
                subject_kind=subject_kind, subject=updated, transition=transition
            )
