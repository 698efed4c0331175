"""Vote entity.

A vote is the ledger record of one user's current opinion of one subject.
Absence of a record means the user has no vote on that subject.
"""

from datetime import datetime

from pydantic import Field

from cfh.domain.model.common import DomainModel
from cfh.domain.value import UserId, VotableType, VoteDirection, VoteKey


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per user per subject
    - Comments only accept upvotes
    - Polymorphic reference to the subject (meme, comment or resource)
    """

    subject_kind: VotableType
    subject_id: int  # MemeId, CommentId or ResourceId
    user_id: UserId
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def key(self) -> VoteKey:
        """Composite ledger key of this vote."""
        return VoteKey(self.subject_kind, self.subject_id, self.user_id)
