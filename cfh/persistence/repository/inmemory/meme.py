"""In-memory meme repository for testing."""

from typing import List, Optional

from cfh.domain.model import Meme
from cfh.domain.repository import MemeRepository
from cfh.domain.value import CounterDelta, MemeId, UserId

from .store import InMemoryStore


class InMemoryMemeRepository(MemeRepository):
    """In-memory implementation of MemeRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, entity_id: int, for_update: bool = False) -> Optional[Meme]:
        """Find a meme by ID (locking is done by the caller's subject lock)."""
        return self.store.memes.get(MemeId(entity_id))

    async def find_all(self) -> List[Meme]:
        """Find all memes in insertion order."""
        return list(self.store.memes.values())

    async def find_by_author(self, author_id: UserId) -> List[Meme]:
        """Find an author's memes in insertion order."""
        return [m for m in self.store.memes.values() if m.author_id == author_id]

    async def create(
        self, author_id: UserId, image_url: str, caption: Optional[str] = None
    ) -> Meme:
        """Create a meme with the next ID."""
        meme = Meme(
            id=MemeId(self.store.next_id("meme")),
            author_id=author_id,
            image_url=image_url,
            caption=caption,
        )
        self.store.memes[meme.id] = meme
        return meme

    async def apply_vote_delta(self, entity_id: int, delta: CounterDelta) -> None:
        """Add a delta to upvotes and downvotes."""
        meme = self.store.memes[MemeId(entity_id)]
        self.store.memes[meme.id] = meme.model_copy(
            update={
                "upvotes": meme.upvotes + delta.upvotes,
                "downvotes": meme.downvotes + delta.downvotes,
            }
        )
