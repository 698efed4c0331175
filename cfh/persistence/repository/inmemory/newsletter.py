"""In-memory newsletter repository for testing."""

from datetime import datetime
from typing import List

from cfh.domain.repository import NewsletterRepository

from .store import InMemoryStore


class InMemoryNewsletterRepository(NewsletterRepository):
    """In-memory implementation of NewsletterRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def add(self, email: str) -> bool:
        """Add a subscriber unless already present."""
        if email in self.store.subscribers:
            return False
        self.store.subscribers[email] = datetime.now()
        return True

    async def find_all(self) -> List[str]:
        """List subscriber addresses in subscription order."""
        return list(self.store.subscribers)
