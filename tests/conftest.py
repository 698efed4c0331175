"""Test configuration and fixtures."""

from datetime import datetime
from typing import Optional

import logfire

from cfh.domain.model import Meme, User
from cfh.domain.value import MemeId, UserId
from cfh.domain.value.types import Username

# Keep telemetry local while testing
logfire.configure(send_to_logfire=False, console=False)


def make_user(user_id: int = 1, username: str = "designer") -> User:
    """Build a user for tests that do not go through registration."""
    return User(
        id=UserId(user_id),
        email=f"{username}@example.com",
        username=Username(username),
        display_name=username,
    )


def make_meme(
    meme_id: int,
    upvotes: int = 0,
    downvotes: int = 0,
    created_at: Optional[datetime] = None,
    author_id: int = 1,
) -> Meme:
    """Build a meme with given counters and creation time."""
    return Meme(
        id=MemeId(meme_id),
        author_id=UserId(author_id),
        image_url=f"https://img.example.com/{meme_id}.png",
        upvotes=upvotes,
        downvotes=downvotes,
        created_at=created_at or datetime(2025, 1, 1, 12, 0, 0),
    )
