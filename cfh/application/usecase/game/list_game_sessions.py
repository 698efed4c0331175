"""List game sessions use case."""

from pydantic import BaseModel, Field

from cfh.domain.service import GameSessionService
from cfh.domain.value import UserId

from .common import GameSessionItem


class ListGameSessionsRequest(BaseModel):
    """List game sessions request."""

    user_id: int  # Player whose sessions are requested
    requester_id: int  # From authenticated user
    limit: int = Field(default=10, ge=1, le=100)


class ListGameSessionsResponse(BaseModel):
    """List game sessions response."""

    sessions: list[GameSessionItem]


class ListGameSessionsUseCase:
    """Use case for a player's recent game sessions."""

    def __init__(self, game_session_service: GameSessionService) -> None:
        self.game_session_service = game_session_service

    async def execute(
        self, request: ListGameSessionsRequest
    ) -> ListGameSessionsResponse:
        """Execute list game sessions flow.

        Raises:
            NotAuthorizedError: If the requester asks for someone else's sessions
        """
        sessions = await self.game_session_service.list_for_user(
            UserId(request.user_id), UserId(request.requester_id), request.limit
        )
        return ListGameSessionsResponse(
            sessions=[GameSessionItem.from_session(s) for s in sessions]
        )
