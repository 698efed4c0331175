"""Score aggregator domain service.

Turns ledger transitions into counter deltas and applies them to the
subject. Memes keep separate up and down counters, comments only count
upvotes and resources keep one signed counter.
"""

from typing import Optional

import logfire

from cfh.domain.repository import (
    CommentRepository,
    MemeRepository,
    ResourceRepository,
    VotableRepository,
)
from cfh.domain.value import CounterDelta, VotableType, VoteDirection, VoteTransition

from .base import Service


def _signed(direction: Optional[VoteDirection]) -> int:
    return direction.signed_value if direction else 0


def _is(direction: Optional[VoteDirection], expected: VoteDirection) -> int:
    return 1 if direction is expected else 0


def compute_delta(subject_kind: VotableType, transition: VoteTransition) -> CounterDelta:
    """Compute the counter changes implied by a transition.

    Args:
        subject_kind: Kind of subject the transition happened on
        transition: Ledger transition

    Returns:
        Delta to add to the subject's counters
    """
    origin, destination = transition.origin, transition.destination

    if subject_kind is VotableType.RESOURCE:
        return CounterDelta(votes=_signed(destination) - _signed(origin))

    upvotes = _is(destination, VoteDirection.UP) - _is(origin, VoteDirection.UP)
    if subject_kind is VotableType.COMMENT:
        return CounterDelta(upvotes=upvotes)

    downvotes = _is(destination, VoteDirection.DOWN) - _is(origin, VoteDirection.DOWN)
    return CounterDelta(upvotes=upvotes, downvotes=downvotes)


class ScoreAggregator(Service):
    """Domain service keeping subject counters in line with the ledger."""

    def __init__(
        self,
        meme_repository: MemeRepository,
        comment_repository: CommentRepository,
        resource_repository: ResourceRepository,
    ) -> None:
        """Initialize score aggregator.

        Args:
            meme_repository: Meme repository
            comment_repository: Comment repository
            resource_repository: Resource repository
        """
        self._repositories: dict[VotableType, VotableRepository] = {
            VotableType.MEME: meme_repository,
            VotableType.COMMENT: comment_repository,
            VotableType.RESOURCE: resource_repository,
        }

    def repository_for(self, subject_kind: VotableType) -> VotableRepository:
        """Get the repository owning subjects of a kind."""
        return self._repositories[subject_kind]

    async def apply(
        self, subject_kind: VotableType, subject_id: int, transition: VoteTransition
    ) -> CounterDelta:
        """Apply a transition to the subject's counters.

        Args:
            subject_kind: Kind of subject
            subject_id: Subject ID
            transition: Ledger transition to apply

        Returns:
            The delta that was applied
        """
        delta = compute_delta(subject_kind, transition)
        with logfire.span(
            "score_aggregator.apply",
            subject_kind=subject_kind.value,
            subject_id=subject_id,
            transition=str(transition),
        ):
            if not delta.is_zero:
                await self.repository_for(subject_kind).apply_vote_delta(
                    subject_id, delta
                )
            logfire.info(
                "Counters updated",
                upvotes=delta.upvotes,
                downvotes=delta.downvotes,
                votes=delta.votes,
            )
            return delta
