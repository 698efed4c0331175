"""Meme repository interface."""

from abc import abstractmethod
from typing import List, Optional

from cfh.domain.model.meme import Meme
from cfh.domain.repository.votable import VotableRepository
from cfh.domain.value import UserId


class MemeRepository(VotableRepository[Meme]):
    """Repository for Meme entity.

    Defines the contract for meme persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_all(self) -> List[Meme]:
        """Find all memes in insertion (identity) order.

        Ordering for display is the feed ranker's job.

        Returns:
            List of memes
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Meme]:
        """Find memes by a specific author in insertion order.

        Args:
            author_id: The author's user ID

        Returns:
            List of memes by the author
        """
        pass

    @abstractmethod
    async def create(
        self, author_id: UserId, image_url: str, caption: Optional[str] = None
    ) -> Meme:
        """Create a meme with zeroed counters.

        Args:
            author_id: The author's user ID
            image_url: URL of the meme image
            caption: Optional caption

        Returns:
            The created meme with its identity assigned
        """
        pass
