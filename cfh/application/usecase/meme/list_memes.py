"""List memes use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from cfh.config import RankingSettings
from cfh.domain.service import FeedRanker, MemeService, UserService, VoteLedger
from cfh.domain.value import FeedSort, UserId

from .common import MemeItem, build_meme_items


class ListMemesRequest(BaseModel):
    """List memes request."""

    sort: FeedSort = FeedSort.HOT
    limit: Optional[int] = Field(default=None, ge=1)  # Defaults to configured size
    offset: int = Field(default=0, ge=0)
    author_id: Optional[int] = None  # Only this author's memes, newest first
    viewer_id: Optional[int] = None  # Current user ID (if authenticated)


class ListMemesResponse(BaseModel):
    """List memes response."""

    memes: list[MemeItem]
    sort: FeedSort
    limit: int
    offset: int


class ListMemesUseCase:
    """Use case for listing the meme feed with ranking and pagination."""

    def __init__(
        self,
        meme_service: MemeService,
        user_service: UserService,
        vote_ledger: VoteLedger,
        feed_ranker: FeedRanker,
        ranking_settings: RankingSettings,
    ) -> None:
        """Initialize list memes use case.

        Args:
            meme_service: Meme domain service
            user_service: User domain service
            vote_ledger: Vote ledger (for the viewer's votes)
            feed_ranker: Feed ranker
            ranking_settings: Page size configuration
        """
        self.meme_service = meme_service
        self.user_service = user_service
        self.vote_ledger = vote_ledger
        self.feed_ranker = feed_ranker
        self.ranking_settings = ranking_settings

    async def execute(self, request: ListMemesRequest) -> ListMemesResponse:
        """Execute list memes flow.

        Args:
            request: List memes request with sort and pagination

        Returns:
            One page of ranked memes
        """
        limit = min(
            request.limit or self.ranking_settings.default_page_size,
            self.ranking_settings.max_page_size,
        )
        sort = FeedSort.NEW if request.author_id is not None else request.sort

        with logfire.span(
            "list_memes.execute",
            sort=sort.value,
            limit=limit,
            offset=request.offset,
            author_id=request.author_id,
        ):
            if request.author_id is not None:
                memes = await self.meme_service.list_by_author(
                    UserId(request.author_id)
                )
            else:
                memes = await self.meme_service.list_all()

            page = self.feed_ranker.rank(memes, sort, request.offset, limit)
            items = await build_meme_items(
                page, self.user_service, self.vote_ledger, request.viewer_id
            )

            logfire.info("Memes listed", count=len(items), total=len(memes))
            return ListMemesResponse(
                memes=items, sort=sort, limit=limit, offset=request.offset
            )
