"""Create game session use case."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from cfh.domain.service import GameSessionService, UserService
from cfh.domain.value import UserId

from .common import GameSessionItem


class CreateGameSessionRequest(BaseModel):
    """Create game session request."""

    user_id: int  # From authenticated user
    score: Optional[int] = None
    sanity_left: Optional[int] = None
    choices: list[Any] = Field(default_factory=list)


class CreateGameSessionResponse(BaseModel):
    """Create game session response."""

    session: GameSessionItem


class CreateGameSessionUseCase:
    """Use case for recording a new play-through."""

    def __init__(
        self, game_session_service: GameSessionService, user_service: UserService
    ) -> None:
        """Initialize create game session use case.

        Args:
            game_session_service: Game session domain service
            user_service: User domain service
        """
        self.game_session_service = game_session_service
        self.user_service = user_service

    async def execute(
        self, request: CreateGameSessionRequest
    ) -> CreateGameSessionResponse:
        """Execute create game session flow."""
        user_id = UserId(request.user_id)
        await self.user_service.get_by_id(user_id)

        session = await self.game_session_service.start_session(
            user_id=user_id,
            score=request.score,
            sanity_left=request.sanity_left,
            choices=request.choices,
        )
        return CreateGameSessionResponse(session=GameSessionItem.from_session(session))
