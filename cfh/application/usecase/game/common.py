"""Game session response items."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from cfh.domain.model import GameSession


class GameSessionItem(BaseModel):
    """Game session as returned to its player."""

    id: int
    user_id: int
    score: Optional[int]
    sanity_left: Optional[int]
    choices: list[Any]
    ended_at: Optional[datetime]
    created_at: datetime

    @classmethod
    def from_session(cls, session: GameSession) -> "GameSessionItem":
        return cls(**session.model_dump())
