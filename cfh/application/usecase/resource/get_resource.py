"""Get resource use case."""

from pydantic import BaseModel

from cfh.domain.service import ResourceService
from cfh.domain.value import ResourceId

from .common import ResourceItem


class GetResourceRequest(BaseModel):
    """Get resource request."""

    resource_id: int


class GetResourceResponse(BaseModel):
    """Get resource response."""

    resource: ResourceItem


class GetResourceUseCase:
    """Use case for fetching one resource."""

    def __init__(self, resource_service: ResourceService) -> None:
        self.resource_service = resource_service

    async def execute(self, request: GetResourceRequest) -> GetResourceResponse:
        """Execute get resource flow.

        Raises:
            NotFoundError: If the resource does not exist
        """
        resource = await self.resource_service.get_by_id(
            ResourceId(request.resource_id)
        )
        return GetResourceResponse(resource=ResourceItem.from_resource(resource))
