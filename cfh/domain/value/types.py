"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from typing import NamedTuple, Optional

from pydantic import field_validator

from cfh.domain.value.common import RootValueObject, ValueObject
from cfh.domain.value.identifiers import UserId


class VoteDirection(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"

    @property
    def signed_value(self) -> int:
        """Contribution of this direction to a single signed counter."""
        return 1 if self is VoteDirection.UP else -1


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    MEME = "meme"
    COMMENT = "comment"
    RESOURCE = "resource"

    @property
    def allowed_directions(self) -> frozenset[VoteDirection]:
        """Directions a user may cast on this kind of subject."""
        if self is VotableType.COMMENT:
            return frozenset({VoteDirection.UP})
        return frozenset({VoteDirection.UP, VoteDirection.DOWN})

    def allows(self, direction: VoteDirection) -> bool:
        """Check whether ``direction`` is legal for this kind."""
        return direction in self.allowed_directions


class FeedSort(str, Enum):
    """Ordering policy for the meme feed."""

    HOT = "hot"  # Net score plus a small recency boost
    NEW = "new"  # Newest first
    TOP = "top"  # Highest net score first


class VoteKey(NamedTuple):
    """Composite key of a vote record: one record per subject and user."""

    subject_kind: VotableType
    subject_id: int
    user_id: UserId


class VoteTransition(ValueObject):
    """Change of a user's vote on a subject.

    ``None`` on either side means "no vote". Produced by the vote ledger and
    consumed by the score aggregator.
    """

    origin: Optional[VoteDirection] = None
    destination: Optional[VoteDirection] = None

    def __str__(self) -> str:
        origin = self.origin.value if self.origin else "none"
        destination = self.destination.value if self.destination else "none"
        return f"{origin}->{destination}"


class Username(RootValueObject[str]):
    """Public username.

    3-30 characters: letters, digits, underscores, dots and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class EmailAddress(RootValueObject[str]):
    """Email address, normalized to lower case."""

    @field_validator("root")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Lower-case and sanity-check an email address."""
        v = v.strip().lower()
        if len(v) < 5 or len(v) > 100 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("A valid email address is required")
        return v


class CounterDelta(ValueObject):
    """Change to apply to a subject's vote counters.

    Memes use ``upvotes`` and ``downvotes``, comments only ``upvotes`` and
    resources only the signed ``votes`` counter.
    """

    upvotes: int = 0
    downvotes: int = 0
    votes: int = 0

    @property
    def is_zero(self) -> bool:
        """Whether applying this delta changes nothing."""
        return self.upvotes == 0 and self.downvotes == 0 and self.votes == 0
