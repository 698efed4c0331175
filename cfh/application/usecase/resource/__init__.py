"""Resource library use cases."""

from .common import ResourceItem
from .create_resource import (
    CreateResourceRequest,
    CreateResourceResponse,
    CreateResourceUseCase,
)
from .get_resource import GetResourceRequest, GetResourceResponse, GetResourceUseCase
from .list_resources import (
    ListResourcesRequest,
    ListResourcesResponse,
    ListResourcesUseCase,
)

__all__ = [
    "ResourceItem",
    "CreateResourceRequest",
    "CreateResourceResponse",
    "CreateResourceUseCase",
    "GetResourceRequest",
    "GetResourceResponse",
    "GetResourceUseCase",
    "ListResourcesRequest",
    "ListResourcesResponse",
    "ListResourcesUseCase",
]
