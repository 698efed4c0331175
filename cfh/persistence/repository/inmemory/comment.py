"""In-memory comment repository for testing."""

from typing import List, Optional

from cfh.domain.model import Comment
from cfh.domain.repository import CommentRepository
from cfh.domain.value import CommentId, CounterDelta, MemeId, UserId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(
        self, entity_id: int, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        return self.store.comments.get(CommentId(entity_id))

    async def find_by_meme(self, meme_id: MemeId) -> List[Comment]:
        """Find comments on a meme, newest first."""
        comments = [c for c in self.store.comments.values() if c.meme_id == meme_id]
        return sorted(comments, key=lambda c: (c.created_at, c.id), reverse=True)

    async def create(
        self,
        meme_id: MemeId,
        author_id: UserId,
        body: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment with the next ID."""
        comment = Comment(
            id=CommentId(self.store.next_id("comment")),
            meme_id=meme_id,
            author_id=author_id,
            body=body,
            parent_id=parent_id,
        )
        self.store.comments[comment.id] = comment
        return comment

    async def apply_vote_delta(self, entity_id: int, delta: CounterDelta) -> None:
        """Add a delta to upvotes."""
        comment = self.store.comments[CommentId(entity_id)]
        self.store.comments[comment.id] = comment.model_copy(
            update={"upvotes": comment.upvotes + delta.upvotes}
        )
