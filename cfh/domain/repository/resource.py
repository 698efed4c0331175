"""Resource repository interface."""

from abc import abstractmethod
from typing import List, Optional

from cfh.domain.model.resource import Resource
from cfh.domain.repository.votable import VotableRepository
from cfh.domain.value import UserId


class ResourceRepository(VotableRepository[Resource]):
    """Repository for Resource entity.

    Defines the contract for resource persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_all(self) -> List[Resource]:
        """Find all resources in insertion (identity) order.

        Returns:
            List of resources
        """
        pass

    @abstractmethod
    async def create(
        self,
        title: str,
        category: Optional[str] = None,
        markdown: Optional[str] = None,
        download_url: Optional[str] = None,
        created_by: Optional[UserId] = None,
    ) -> Resource:
        """Create a resource with a zeroed vote counter.

        Args:
            title: Resource title
            category: Library category (exact-match filter key)
            markdown: Markdown body
            download_url: Download link
            created_by: ID of the creating user

        Returns:
            The created resource with its identity assigned
        """
        pass
