"""Game session domain service."""

from datetime import datetime
from typing import Any, Optional

import logfire

from cfh.domain.error import NotAuthorizedError, NotFoundError
from cfh.domain.model import GameSession
from cfh.domain.repository import GameSessionRepository
from cfh.domain.value import GameSessionId, UserId

from .base import Service


class GameSessionService(Service):
    """Domain service for game session operations.

    Sessions are private: only their owner may list or update them.
    """

    def __init__(self, game_session_repository: GameSessionRepository) -> None:
        """Initialize game session service.

        Args:
            game_session_repository: Game session repository
        """
        self.game_session_repository = game_session_repository

    async def list_for_user(
        self, user_id: UserId, requester_id: UserId, limit: int = 10
    ) -> list[GameSession]:
        """List a player's sessions, newest first.

        Args:
            user_id: Player whose sessions are requested
            requester_id: Authenticated caller
            limit: Maximum number of sessions

        Returns:
            List of sessions

        Raises:
            NotAuthorizedError: If the caller is not the player
        """
        with logfire.span(
            "game_session_service.list_for_user", user_id=user_id, limit=limit
        ):
            if user_id != requester_id:
                logfire.warn(
                    "Listing another user's sessions",
                    user_id=user_id,
                    requester_id=requester_id,
                )
                raise NotAuthorizedError("game sessions", str(user_id), str(requester_id))
            return await self.game_session_repository.find_by_user(user_id, limit)

    async def start_session(
        self,
        user_id: UserId,
        score: Optional[int] = None,
        sanity_left: Optional[int] = None,
        choices: Optional[list[Any]] = None,
    ) -> GameSession:
        """Persist a new session for a player."""
        with logfire.span("game_session_service.start_session", user_id=user_id):
            session = await self.game_session_repository.create(
                user_id=user_id,
                score=score,
                sanity_left=sanity_left,
                choices=choices or [],
            )
            logfire.info("Game session created", session_id=session.id)
            return session

    async def update_session(
        self,
        session_id: GameSessionId,
        requester_id: UserId,
        score: Optional[int] = None,
        sanity_left: Optional[int] = None,
        choices: Optional[list[Any]] = None,
        ended_at: Optional[datetime] = None,
    ) -> GameSession:
        """Partially update a session; None leaves a field unchanged.

        Raises:
            NotFoundError: If the session does not exist
            NotAuthorizedError: If the caller does not own the session
        """
        with logfire.span(
            "game_session_service.update_session", session_id=session_id
        ):
            session = await self.game_session_repository.find_by_id(session_id)
            if not session:
                logfire.warn("Game session not found", session_id=session_id)
                raise NotFoundError("Game session", str(session_id))
            if session.user_id != requester_id:
                logfire.warn(
                    "Unauthorized game session update",
                    session_id=session_id,
                    requester_id=requester_id,
                )
                raise NotAuthorizedError(
                    "game session", str(session_id), str(requester_id)
                )

            changes: dict[str, Any] = {
                "score": score,
                "sanity_left": sanity_left,
                "choices": choices,
                "ended_at": ended_at,
            }
            updated = session.model_copy(
                update={k: v for k, v in changes.items() if v is not None}
            )
            saved = await self.game_session_repository.save(updated)
            logfire.info("Game session updated", session_id=session_id)
            return saved
