"""Comment domain service."""

from typing import Optional

import logfire

from cfh.domain.error import NotFoundError, ValidationError
from cfh.domain.model import Comment
from cfh.domain.repository import CommentRepository
from cfh.domain.value import CommentId, MemeId, UserId

from .base import Service
from .meme_service import MemeService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, meme_service: MemeService
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            meme_service: Meme domain service
        """
        self.comment_repository = comment_repository
        self.meme_service = meme_service

    async def get_by_id(self, comment_id: CommentId) -> Comment:
        """Get comment by ID.

        Raises:
            NotFoundError: If comment not found
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn("Comment not found", comment_id=comment_id)
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_for_meme(self, meme_id: MemeId) -> list[Comment]:
        """List comments on a meme, newest first."""
        with logfire.span("comment_service.list_for_meme", meme_id=meme_id):
            comments = await self.comment_repository.find_by_meme(meme_id)
            logfire.info("Comments loaded", meme_id=meme_id, count=len(comments))
            return comments

    async def create_comment(
        self,
        meme_id: MemeId,
        author_id: UserId,
        body: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment on a meme.

        Args:
            meme_id: Meme being commented on
            author_id: Author's user ID
            body: Comment text
            parent_id: Comment being replied to

        Returns:
            Created comment

        Raises:
            NotFoundError: If the meme or the parent comment does not exist
            ValidationError: If the parent belongs to another meme
        """
        with logfire.span(
            "comment_service.create_comment", meme_id=meme_id, author_id=author_id
        ):
            await self.meme_service.get_by_id(meme_id)

            if parent_id is not None:
                parent = await self.get_by_id(parent_id)
                if parent.meme_id != meme_id:
                    logfire.warn(
                        "Reply to comment on another meme",
                        meme_id=meme_id,
                        parent_id=parent_id,
                    )
                    raise ValidationError("Parent comment belongs to a different meme")

            comment = await self.comment_repository.create(
                meme_id=meme_id, author_id=author_id, body=body, parent_id=parent_id
            )
            logfire.info("Comment created", comment_id=comment.id, meme_id=meme_id)
            return comment
