"""Newsletter subscriber repository interface."""

from abc import ABC, abstractmethod
from typing import List


class NewsletterRepository(ABC):
    """Repository for newsletter subscribers."""

    @abstractmethod
    async def add(self, email: str) -> bool:
        """Add a subscriber.

        Args:
            email: Normalized (lower-case) email address

        Returns:
            True if added, False if the address was already subscribed
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[str]:
        """List subscriber addresses in subscription order.

        Returns:
            Email addresses
        """
        pass
