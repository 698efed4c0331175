"""Create resource use case."""

from typing import Optional

from pydantic import BaseModel, Field

from cfh.domain.service import ResourceService, UserService
from cfh.domain.value import UserId

from .common import ResourceItem


class CreateResourceRequest(BaseModel):
    """Create resource request."""

    title: str = Field(min_length=1, max_length=300)
    category: Optional[str] = None
    markdown: Optional[str] = None
    download_url: Optional[str] = None
    created_by: int  # From authenticated user


class CreateResourceResponse(BaseModel):
    """Create resource response."""

    resource: ResourceItem


class CreateResourceUseCase:
    """Use case for adding a resource to the library."""

    def __init__(
        self, resource_service: ResourceService, user_service: UserService
    ) -> None:
        """Initialize create resource use case.

        Args:
            resource_service: Resource domain service
            user_service: User domain service
        """
        self.resource_service = resource_service
        self.user_service = user_service

    async def execute(self, request: CreateResourceRequest) -> CreateResourceResponse:
        """Execute create resource flow.

        Raises:
            NotFoundError: If the creating user does not exist
        """
        created_by = UserId(request.created_by)
        await self.user_service.get_by_id(created_by)

        resource = await self.resource_service.create_resource(
            title=request.title,
            category=request.category,
            markdown=request.markdown,
            download_url=request.download_url,
            created_by=created_by,
        )
        return CreateResourceResponse(resource=ResourceItem.from_resource(resource))
