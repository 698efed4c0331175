"""Game session repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from cfh.domain.model.game_session import GameSession
from cfh.domain.value import GameSessionId, UserId


class GameSessionRepository(ABC):
    """Repository for GameSession entity."""

    @abstractmethod
    async def find_by_id(self, session_id: GameSessionId) -> Optional[GameSession]:
        """Find a game session by ID.

        Args:
            session_id: The session's identifier

        Returns:
            The session if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId, limit: int = 10) -> List[GameSession]:
        """Find a user's game sessions, newest first.

        Args:
            user_id: The player's user ID
            limit: Maximum number of sessions to return

        Returns:
            List of sessions
        """
        pass

    @abstractmethod
    async def create(
        self,
        user_id: UserId,
        score: Optional[int] = None,
        sanity_left: Optional[int] = None,
        choices: Optional[list[Any]] = None,
    ) -> GameSession:
        """Create a game session.

        Args:
            user_id: The player's user ID
            score: Initial score
            sanity_left: Initial sanity
            choices: Choices made so far

        Returns:
            The created session with its identity assigned
        """
        pass

    @abstractmethod
    async def save(self, session: GameSession) -> GameSession:
        """Save an existing game session.

        Args:
            session: The session to save

        Returns:
            The saved session
        """
        pass
