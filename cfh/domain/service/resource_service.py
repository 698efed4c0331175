"""Resource library domain service."""

from typing import Optional

import logfire

from cfh.domain.error import NotFoundError
from cfh.domain.model import Resource
from cfh.domain.repository import ResourceRepository
from cfh.domain.value import ResourceId, UserId

from .base import Service


class ResourceService(Service):
    """Domain service for resource library operations."""

    def __init__(self, resource_repository: ResourceRepository) -> None:
        """Initialize resource service.

        Args:
            resource_repository: Resource repository
        """
        self.resource_repository = resource_repository

    async def get_by_id(self, resource_id: ResourceId) -> Resource:
        """Get resource by ID.

        Raises:
            NotFoundError: If resource not found
        """
        with logfire.span("resource_service.get_by_id", resource_id=resource_id):
            resource = await self.resource_repository.find_by_id(resource_id)
            if not resource:
                logfire.warn("Resource not found", resource_id=resource_id)
                raise NotFoundError("Resource", str(resource_id))
            return resource

    async def list_all(self) -> list[Resource]:
        """List every resource in insertion order."""
        return await self.resource_repository.find_all()

    async def create_resource(
        self,
        title: str,
        category: Optional[str],
        markdown: Optional[str],
        download_url: Optional[str],
        created_by: UserId,
    ) -> Resource:
        """Add a resource to the library."""
        with logfire.span("resource_service.create_resource", title=title):
            resource = await self.resource_repository.create(
                title=title,
                category=category,
                markdown=markdown,
                download_url=download_url,
                created_by=created_by,
            )
            logfire.info("Resource created", resource_id=resource.id)
            return resource
