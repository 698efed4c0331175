"""Meme entity.

Memes are the items of the main feed. They carry separate up and down
counters which are a cached derivation of the vote ledger.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from cfh.domain.model.common import DomainModel
from cfh.domain.value import MemeId, UserId


class Meme(DomainModel):
    """Meme entity."""

    id: MemeId
    author_id: UserId
    image_url: str = Field(min_length=1)
    caption: Optional[str] = Field(default=None, max_length=2000)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def net_score(self) -> int:
        """Upvotes minus downvotes."""
        return self.upvotes - self.downvotes
