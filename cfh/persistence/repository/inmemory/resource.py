"""In-memory resource repository for testing."""

from typing import List, Optional

from cfh.domain.model import Resource
from cfh.domain.repository import ResourceRepository
from cfh.domain.value import CounterDelta, ResourceId, UserId

from .store import InMemoryStore


class InMemoryResourceRepository(ResourceRepository):
    """In-memory implementation of ResourceRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(
        self, entity_id: int, for_update: bool = False
    ) -> Optional[Resource]:
        """Find a resource by ID."""
        return self.store.resources.get(ResourceId(entity_id))

    async def find_all(self) -> List[Resource]:
        """Find all resources in insertion order."""
        return list(self.store.resources.values())

    async def create(
        self,
        title: str,
        category: Optional[str] = None,
        markdown: Optional[str] = None,
        download_url: Optional[str] = None,
        created_by: Optional[UserId] = None,
    ) -> Resource:
        """Create a resource with the next ID."""
        resource = Resource(
            id=ResourceId(self.store.next_id("resource")),
            title=title,
            category=category,
            markdown=markdown,
            download_url=download_url,
            created_by=created_by,
        )
        self.store.resources[resource.id] = resource
        return resource

    async def apply_vote_delta(self, entity_id: int, delta: CounterDelta) -> None:
        """Add a delta to the signed vote counter."""
        resource = self.store.resources[ResourceId(entity_id)]
        self.store.resources[resource.id] = resource.model_copy(
            update={"votes": resource.votes + delta.votes}
        )
