"""Game session entity.

A game session records one play-through of the narrative game.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from cfh.domain.model.common import DomainModel
from cfh.domain.value import GameSessionId, UserId


class GameSession(DomainModel):
    """Game session entity."""

    id: GameSessionId
    user_id: UserId
    score: Optional[int] = None
    sanity_left: Optional[int] = None
    choices: list[Any] = Field(default_factory=list)
    ended_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
