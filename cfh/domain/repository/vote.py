"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from cfh.domain.model.vote import Vote
from cfh.domain.value import UserId, VotableType, VoteKey


class VoteRepository(ABC):
    """Repository for Vote records (the vote ledger's storage).

    Holds at most one vote per (subject kind, subject ID, user ID) key.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find(self, key: VoteKey) -> Optional[Vote]:
        """Find the vote stored under a key.

        Args:
            key: Subject kind, subject ID and user ID

        Returns:
            The vote if one is active, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert or overwrite the vote stored under ``vote.key``.

        Args:
            vote: The vote to store

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def delete(self, key: VoteKey) -> bool:
        """Delete the vote stored under a key.

        Args:
            key: Subject kind, subject ID and user ID

        Returns:
            True if a vote was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_by_subject(
        self, subject_kind: VotableType, subject_id: int
    ) -> List[Vote]:
        """Find all active votes on a subject.

        Args:
            subject_kind: Type of subject
            subject_id: ID of the subject

        Returns:
            List of votes on the subject
        """
        pass

    @abstractmethod
    async def find_by_user_and_subjects(
        self,
        user_id: UserId,
        subject_kind: VotableType,
        subject_ids: Sequence[int],
    ) -> List[Vote]:
        """Find a user's votes on multiple subjects (batch query).

        Args:
            user_id: The user's ID
            subject_kind: Type of subjects
            subject_ids: Subject IDs to check

        Returns:
            List of the user's votes on those subjects
        """
        pass
