"""In-memory vote repository for testing."""

from typing import List, Optional, Sequence

from cfh.domain.model import Vote
from cfh.domain.repository import VoteRepository
from cfh.domain.value import UserId, VotableType, VoteKey

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository, keyed by ``VoteKey``."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find(self, key: VoteKey) -> Optional[Vote]:
        """Find the vote stored under a key."""
        return self.store.votes.get(key)

    async def save(self, vote: Vote) -> Vote:
        """Insert or overwrite a vote."""
        self.store.votes[vote.key] = vote
        return vote

    async def delete(self, key: VoteKey) -> bool:
        """Delete the vote stored under a key."""
        return self.store.votes.pop(key, None) is not None

    async def find_by_subject(
        self, subject_kind: VotableType, subject_id: int
    ) -> List[Vote]:
        """Find all votes on a subject."""
        return [
            v
            for v in self.store.votes.values()
            if v.subject_kind == subject_kind and v.subject_id == subject_id
        ]

    async def find_by_user_and_subjects(
        self,
        user_id: UserId,
        subject_kind: VotableType,
        subject_ids: Sequence[int],
    ) -> List[Vote]:
        """Find a user's votes on multiple subjects (batch query)."""
        wanted = set(subject_ids)
        return [
            self.store.votes[key]
            for key in self.store.votes
            if key.user_id == user_id
            and key.subject_kind == subject_kind
            and key.subject_id in wanted
        ]
