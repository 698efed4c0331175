"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand.
"""

from typing import Any, Dict

from cfh.domain.model import Comment, GameSession, Meme, Resource, User, Vote
from cfh.domain.value import (
    CommentId,
    GameSessionId,
    MemeId,
    ResourceId,
    UserId,
    VotableType,
    VoteDirection,
)
from cfh.domain.value.types import Username


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        email=row["email"],
        username=Username(row["username"]),
        password_hash=row.get("password_hash"),
        display_name=row.get("display_name"),
        avatar=row.get("avatar"),
        bio=row.get("bio"),
        provider=row.get("provider") or "local",
        provider_id=row.get("provider_id"),
        level=row.get("level") or 1,
        xp=row.get("xp") or 0,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database update
    """
    data = user.model_dump()
    data["username"] = user.username.root
    return data


def row_to_meme(row: Dict[str, Any]) -> Meme:
    """Convert database row to Meme domain model."""
    return Meme(
        id=MemeId(row["id"]),
        author_id=UserId(row["author_id"]),
        image_url=row["image_url"],
        caption=row.get("caption"),
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        created_at=row["created_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(row["id"]),
        meme_id=MemeId(row["meme_id"]),
        author_id=UserId(row["author_id"]),
        body=row["body"],
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        upvotes=row["upvotes"],
        created_at=row["created_at"],
    )


def row_to_resource(row: Dict[str, Any]) -> Resource:
    """Convert database row to Resource domain model."""
    created_by = row.get("created_by")
    return Resource(
        id=ResourceId(row["id"]),
        title=row["title"],
        category=row.get("category"),
        markdown=row.get("markdown"),
        download_url=row.get("download_url"),
        votes=row["votes"],
        created_by=UserId(created_by) if created_by is not None else None,
        created_at=row["created_at"],
    )


def row_to_game_session(row: Dict[str, Any]) -> GameSession:
    """Convert database row to GameSession domain model."""
    return GameSession(
        id=GameSessionId(row["id"]),
        user_id=UserId(row["user_id"]),
        score=row.get("score"),
        sanity_left=row.get("sanity_left"),
        choices=row.get("choices") or [],
        ended_at=row.get("ended_at"),
        created_at=row["created_at"],
    )


def game_session_to_dict(session: GameSession) -> Dict[str, Any]:
    """Convert GameSession domain model to database dict."""
    return session.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        subject_kind=VotableType(row["subject_kind"]),
        subject_id=row["subject_id"],
        user_id=UserId(row["user_id"]),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "subject_kind": vote.subject_kind.value,
        "subject_id": vote.subject_id,
        "user_id": vote.user_id,
        "direction": vote.direction.value,
    }
