"""Meme response items shared by the meme use cases."""

from datetime import datetime
from typing import Optional, Sequence

from pydantic import BaseModel

from cfh.application.usecase.shared import AuthorSummary
from cfh.domain.model import Meme
from cfh.domain.service import UserService, VoteLedger
from cfh.domain.value import UserId, VotableType, VoteDirection


class MemeItem(BaseModel):
    """Meme as shown in the feed."""

    id: int
    author_id: int
    image_url: str
    caption: Optional[str]
    upvotes: int
    downvotes: int
    created_at: datetime
    author: Optional[AuthorSummary] = None
    user_vote: Optional[VoteDirection] = None


async def build_meme_items(
    memes: Sequence[Meme],
    user_service: UserService,
    vote_ledger: VoteLedger,
    viewer_id: Optional[int] = None,
) -> list[MemeItem]:
    """Decorate memes with their author and the viewer's vote.

    Authors and votes are fetched in one batch each.
    """
    authors = await user_service.get_by_ids([meme.author_id for meme in memes])

    user_votes: dict[int, VoteDirection] = {}
    if viewer_id is not None:
        user_votes = await vote_ledger.directions_for(
            UserId(viewer_id), VotableType.MEME, [meme.id for meme in memes]
        )

    items = []
    for meme in memes:
        author = authors.get(meme.author_id)
        items.append(
            MemeItem(
                id=meme.id,
                author_id=meme.author_id,
                image_url=meme.image_url,
                caption=meme.caption,
                upvotes=meme.upvotes,
                downvotes=meme.downvotes,
                created_at=meme.created_at,
                author=AuthorSummary.from_user(author) if author else None,
                user_vote=user_votes.get(meme.id),
            )
        )
    return items
