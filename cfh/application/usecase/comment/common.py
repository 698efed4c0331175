"""Comment response items shared by the comment use cases."""

from datetime import datetime
from typing import Optional, Sequence

from pydantic import BaseModel

from cfh.application.usecase.shared import AuthorSummary
from cfh.domain.model import Comment
from cfh.domain.service import UserService, VoteLedger
from cfh.domain.value import UserId, VotableType, VoteDirection


class CommentItem(BaseModel):
    """Comment as shown under a meme."""

    id: int
    meme_id: int
    author_id: int
    body: str
    parent_id: Optional[int]
    upvotes: int
    created_at: datetime
    author: Optional[AuthorSummary] = None
    user_vote: Optional[VoteDirection] = None


async def build_comment_items(
    comments: Sequence[Comment],
    user_service: UserService,
    vote_ledger: VoteLedger,
    viewer_id: Optional[int] = None,
) -> list[CommentItem]:
    """Decorate comments with their author and the viewer's vote."""
    authors = await user_service.get_by_ids([c.author_id for c in comments])

    user_votes: dict[int, VoteDirection] = {}
    if viewer_id is not None:
        user_votes = await vote_ledger.directions_for(
            UserId(viewer_id), VotableType.COMMENT, [c.id for c in comments]
        )

    return [
        CommentItem(
            id=comment.id,
            meme_id=comment.meme_id,
            author_id=comment.author_id,
            body=comment.body,
            parent_id=comment.parent_id,
            upvotes=comment.upvotes,
            created_at=comment.created_at,
            author=(
                AuthorSummary.from_user(authors[comment.author_id])
                if comment.author_id in authors
                else None
            ),
            user_vote=user_votes.get(comment.id),
        )
        for comment in comments
    ]
