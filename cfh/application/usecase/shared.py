"""Response models shared by several use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from cfh.domain.model import User

# Every community member is shown with the same title for now
DEFAULT_AUTHOR_TITLE = "Designer"


class AuthorSummary(BaseModel):
    """Public summary of a content author."""

    id: int
    username: str
    level: int
    avatar: Optional[str]
    title: str = DEFAULT_AUTHOR_TITLE

    @classmethod
    def from_user(cls, user: User) -> "AuthorSummary":
        return cls(
            id=user.id,
            username=user.username.root,
            level=user.level,
            avatar=user.avatar,
        )


class UserSummary(BaseModel):
    """Account details returned to the account owner."""

    id: int
    email: str
    username: str
    display_name: Optional[str]
    avatar: Optional[str]
    bio: Optional[str]
    provider: str
    level: int
    xp: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            id=user.id,
            email=user.email,
            username=user.username.root,
            display_name=user.display_name,
            avatar=user.avatar,
            bio=user.bio,
            provider=user.provider,
            level=user.level,
            xp=user.xp,
            created_at=user.created_at,
        )
