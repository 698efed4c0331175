"""Resource response items."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from cfh.domain.model import Resource
from cfh.domain.value import VoteDirection


class ResourceItem(BaseModel):
    """Resource as shown in the library."""

    id: int
    title: str
    category: Optional[str]
    markdown: Optional[str]
    download_url: Optional[str]
    votes: int
    created_by: Optional[int]
    created_at: datetime
    user_vote: Optional[VoteDirection] = None

    @classmethod
    def from_resource(
        cls, resource: Resource, user_vote: Optional[VoteDirection] = None
    ) -> "ResourceItem":
        return cls(
            id=resource.id,
            title=resource.title,
            category=resource.category,
            markdown=resource.markdown,
            download_url=resource.download_url,
            votes=resource.votes,
            created_by=resource.created_by,
            created_at=resource.created_at,
            user_vote=user_vote,
        )
