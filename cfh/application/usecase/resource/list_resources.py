"""List resources use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from cfh.domain.service import FeedRanker, ResourceService, VoteLedger
from cfh.domain.value import UserId, VotableType

from .common import ResourceItem


class ListResourcesRequest(BaseModel):
    """List resources request."""

    category: Optional[str] = None  # Exact-match filter
    viewer_id: Optional[int] = None


class ListResourcesResponse(BaseModel):
    """List resources response."""

    resources: list[ResourceItem]


class ListResourcesUseCase:
    """Use case for browsing the resource library, most voted first."""

    def __init__(
        self,
        resource_service: ResourceService,
        feed_ranker: FeedRanker,
        vote_ledger: VoteLedger,
    ) -> None:
        """Initialize list resources use case.

        Args:
            resource_service: Resource domain service
            feed_ranker: Feed ranker
            vote_ledger: Vote ledger (for the viewer's votes)
        """
        self.resource_service = resource_service
        self.feed_ranker = feed_ranker
        self.vote_ledger = vote_ledger

    async def execute(self, request: ListResourcesRequest) -> ListResourcesResponse:
        """Execute list resources flow."""
        with logfire.span("list_resources.execute", category=request.category):
            resources = await self.resource_service.list_all()
            ranked = self.feed_ranker.rank_resources(resources, request.category)

            user_votes = {}
            if request.viewer_id is not None:
                user_votes = await self.vote_ledger.directions_for(
                    UserId(request.viewer_id),
                    VotableType.RESOURCE,
                    [r.id for r in ranked],
                )

            logfire.info("Resources listed", count=len(ranked))
            return ListResourcesResponse(
                resources=[
                    ResourceItem.from_resource(r, user_votes.get(r.id)) for r in ranked
                ]
            )
