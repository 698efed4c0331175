"""Domain model entities."""

from cfh.domain.model.comment import Comment
from cfh.domain.model.game_session import GameSession
from cfh.domain.model.meme import Meme
from cfh.domain.model.resource import Resource
from cfh.domain.model.user import User
from cfh.domain.model.vote import Vote

__all__ = [
    "User",
    "Meme",
    "Comment",
    "Resource",
    "GameSession",
    "Vote",
]
