"""Create comment use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from cfh.domain.service import CommentService, UserService, VoteLedger
from cfh.domain.value import CommentId, MemeId, UserId

from .common import CommentItem, build_comment_items


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    meme_id: int
    author_id: int  # From authenticated user
    body: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[int] = None


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on a meme or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            vote_ledger: Vote ledger
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.vote_ledger = vote_ledger

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            NotFoundError: If the author, meme or parent comment does not exist
            ValidationError: If the parent is on a different meme
        """
        with logfire.span(
            "create_comment.execute",
            meme_id=request.meme_id,
            author_id=request.author_id,
        ):
            author_id = UserId(request.author_id)
            await self.user_service.get_by_id(author_id)

            comment = await self.comment_service.create_comment(
                meme_id=MemeId(request.meme_id),
                author_id=author_id,
                body=request.body,
                parent_id=(
                    CommentId(request.parent_id)
                    if request.parent_id is not None
                    else None
                ),
            )
            [item] = await build_comment_items(
                [comment], self.user_service, self.vote_ledger
            )
            return CreateCommentResponse(comment=item)
