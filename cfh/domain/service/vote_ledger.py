"""Vote ledger domain service.

The ledger is the single source of truth for who voted which way on what.
It records at most one direction per (subject kind, subject, user) and
reports every change as a ``VoteTransition``. It never touches counters.
"""

from typing import Optional, Sequence

import logfire

from cfh.domain.error import InvalidDirectionError
from cfh.domain.model.vote import Vote
from cfh.domain.repository import VoteRepository
from cfh.domain.value import (
    UserId,
    VotableType,
    VoteDirection,
    VoteKey,
    VoteTransition,
)

from .base import Service


class VoteLedger(Service):
    """Domain service recording per-user votes."""

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote ledger.

        Args:
            vote_repository: Storage for vote records
        """
        self.vote_repository = vote_repository

    @staticmethod
    def check_direction(subject_kind: VotableType, direction: VoteDirection) -> None:
        """Reject a direction that is not legal for the subject kind.

        Raises:
            InvalidDirectionError: If e.g. a comment is downvoted
        """
        if not subject_kind.allows(direction):
            logfire.warn(
                "Illegal vote direction",
                subject_kind=subject_kind.value,
                direction=direction.value,
            )
            raise InvalidDirectionError(subject_kind.value, direction.value)

    async def apply_vote(
        self,
        subject_kind: VotableType,
        subject_id: int,
        user_id: UserId,
        direction: VoteDirection,
    ) -> VoteTransition:
        """Record a vote and report how the user's vote changed.

        Voting the same direction twice removes the vote (toggle-off).
        Voting the other direction replaces it.

        Args:
            subject_kind: Kind of subject
            subject_id: Subject ID
            user_id: Voting user
            direction: Requested direction

        Returns:
            Transition from the previous to the new direction

        Raises:
            InvalidDirectionError: If the direction is illegal for the kind
        """
        self.check_direction(subject_kind, direction)

        key = VoteKey(subject_kind, subject_id, user_id)
        with logfire.span(
            "vote_ledger.apply_vote",
            subject_kind=subject_kind.value,
            subject_id=subject_id,
            user_id=user_id,
            direction=direction.value,
        ):
            existing = await self.vote_repository.find(key)

            if existing is None:
                await self.vote_repository.save(
                    Vote(
                        subject_kind=subject_kind,
                        subject_id=subject_id,
                        user_id=user_id,
                        direction=direction,
                    )
                )
                transition = VoteTransition(origin=None, destination=direction)
            elif existing.direction == direction:
                await self.vote_repository.delete(key)
                transition = VoteTransition(origin=direction, destination=None)
            else:
                await self.vote_repository.save(
                    existing.model_copy(update={"direction": direction})
                )
                transition = VoteTransition(
                    origin=existing.direction, destination=direction
                )

            logfire.info("Vote recorded", transition=str(transition))
            return transition

    async def current_direction(self, key: VoteKey) -> Optional[VoteDirection]:
        """Get the active direction for a key, or None if there is no vote."""
        vote = await self.vote_repository.find(key)
        return vote.direction if vote else None

    async def directions_for(
        self,
        user_id: UserId,
        subject_kind: VotableType,
        subject_ids: Sequence[int],
    ) -> dict[int, VoteDirection]:
        """Get a user's active directions on many subjects.

        Args:
            user_id: The user
            subject_kind: Kind of the subjects
            subject_ids: Subjects to look up

        Returns:
            Map of subject ID to direction, only for subjects with a vote
        """
        if not subject_ids:
            return {}
        votes = await self.vote_repository.find_by_user_and_subjects(
            user_id, subject_kind, subject_ids
        )
        return {vote.subject_id: vote.direction for vote in votes}
