"""Get comments use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from cfh.domain.service import CommentService, MemeService, UserService, VoteLedger
from cfh.domain.value import MemeId

from .common import CommentItem, build_comment_items


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    meme_id: int
    viewer_id: Optional[int] = None  # Current user ID (if authenticated)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentItem]


class GetCommentsUseCase:
    """Use case for listing the comments on a meme, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        meme_service: MemeService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            meme_service: Meme domain service
            user_service: User domain service
            vote_ledger: Vote ledger (for the viewer's votes)
        """
        self.comment_service = comment_service
        self.meme_service = meme_service
        self.user_service = user_service
        self.vote_ledger = vote_ledger

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the meme does not exist
        """
        with logfire.span("get_comments.execute", meme_id=request.meme_id):
            meme_id = MemeId(request.meme_id)
            await self.meme_service.get_by_id(meme_id)

            comments = await self.comment_service.list_for_meme(meme_id)
            items = await build_comment_items(
                comments, self.user_service, self.vote_ledger, request.viewer_id
            )
            return GetCommentsResponse(comments=items)
