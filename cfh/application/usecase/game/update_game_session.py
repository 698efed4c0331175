"""Update game session use case."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from cfh.domain.service import GameSessionService
from cfh.domain.value import GameSessionId, UserId

from .common import GameSessionItem


class UpdateGameSessionRequest(BaseModel):
    """Update game session request.

    Fields left as None are not changed.
    """

    session_id: int
    requester_id: int  # From authenticated user
    score: Optional[int] = None
    sanity_left: Optional[int] = None
    choices: Optional[list[Any]] = None
    ended_at: Optional[datetime] = None


class UpdateGameSessionResponse(BaseModel):
    """Update game session response."""

    session: GameSessionItem


class UpdateGameSessionUseCase:
    """Use case for saving progress or finishing a play-through."""

    def __init__(self, game_session_service: GameSessionService) -> None:
        self.game_session_service = game_session_service

    async def execute(
        self, request: UpdateGameSessionRequest
    ) -> UpdateGameSessionResponse:
        """Execute update game session flow.

        Raises:
            NotFoundError: If the session does not exist
            NotAuthorizedError: If the requester does not own the session
        """
        session = await self.game_session_service.update_session(
            session_id=GameSessionId(request.session_id),
            requester_id=UserId(request.requester_id),
            score=request.score,
            sanity_left=request.sanity_left,
            choices=request.choices,
            ended_at=request.ended_at,
        )
        return UpdateGameSessionResponse(session=GameSessionItem.from_session(session))
