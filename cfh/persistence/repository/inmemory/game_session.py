"""In-memory game session repository for testing."""

from typing import Any, List, Optional

from cfh.domain.model import GameSession
from cfh.domain.repository import GameSessionRepository
from cfh.domain.value import GameSessionId, UserId

from .store import InMemoryStore


class InMemoryGameSessionRepository(GameSessionRepository):
    """In-memory implementation of GameSessionRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, session_id: GameSessionId) -> Optional[GameSession]:
        """Find a game session by ID."""
        return self.store.game_sessions.get(session_id)

    async def find_by_user(self, user_id: UserId, limit: int = 10) -> List[GameSession]:
        """Find a user's sessions, newest first."""
        sessions = [s for s in self.store.game_sessions.values() if s.user_id == user_id]
        sessions.sort(key=lambda s: (s.created_at, s.id), reverse=True)
        return sessions[:limit]

    async def create(
        self,
        user_id: UserId,
        score: Optional[int] = None,
        sanity_left: Optional[int] = None,
        choices: Optional[list[Any]] = None,
    ) -> GameSession:
        """Create a session with the next ID."""
        session = GameSession(
            id=GameSessionId(self.store.next_id("game_session")),
            user_id=user_id,
            score=score,
            sanity_left=sanity_left,
            choices=choices or [],
        )
        self.store.game_sessions[session.id] = session
        return session

    async def save(self, session: GameSession) -> GameSession:
        """Replace a stored session."""
        self.store.game_sessions[session.id] = session
        return session
