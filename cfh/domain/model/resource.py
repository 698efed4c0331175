"""Resource entity.

Resources are downloadable templates and guides in the library. Their score
is a single signed counter: an upvote adds one, a downvote removes one.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from cfh.domain.model.common import DomainModel
from cfh.domain.value import ResourceId, UserId


class Resource(DomainModel):
    """Resource entity."""

    id: ResourceId
    title: str = Field(min_length=1, max_length=300)
    category: Optional[str] = None
    markdown: Optional[str] = None
    download_url: Optional[str] = None
    votes: int = 0
    created_by: Optional[UserId] = None
    created_at: datetime = Field(default_factory=datetime.now)
