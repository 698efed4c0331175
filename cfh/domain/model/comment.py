"""Comment entity.

Comments belong to a meme and may reply to another comment on the same meme.
They can only be upvoted.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from cfh.domain.model.common import DomainModel
from cfh.domain.value import CommentId, MemeId, UserId


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    meme_id: MemeId
    author_id: UserId
    body: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    upvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
