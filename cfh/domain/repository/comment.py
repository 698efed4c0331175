"""Comment repository interface."""

from abc import abstractmethod
from typing import List, Optional

from cfh.domain.model.comment import Comment
from cfh.domain.repository.votable import VotableRepository
from cfh.domain.value import CommentId, MemeId, UserId


class CommentRepository(VotableRepository[Comment]):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_meme(self, meme_id: MemeId) -> List[Comment]:
        """Find all comments on a meme, newest first.

        Args:
            meme_id: The meme ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def create(
        self,
        meme_id: MemeId,
        author_id: UserId,
        body: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment with zeroed counters.

        Args:
            meme_id: The meme being commented on
            author_id: The author's user ID
            body: Comment text
            parent_id: Comment being replied to, if any

        Returns:
            The created comment with its identity assigned
        """
        pass
