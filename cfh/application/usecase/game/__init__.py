"""Game session use cases."""

from .common import GameSessionItem
from .create_game_session import (
    CreateGameSessionRequest,
    CreateGameSessionResponse,
    CreateGameSessionUseCase,
)
from .list_game_sessions import (
    ListGameSessionsRequest,
    ListGameSessionsResponse,
    ListGameSessionsUseCase,
)
from .update_game_session import (
    UpdateGameSessionRequest,
    UpdateGameSessionResponse,
    UpdateGameSessionUseCase,
)

__all__ = [
    "GameSessionItem",
    "CreateGameSessionRequest",
    "CreateGameSessionResponse",
    "CreateGameSessionUseCase",
    "ListGameSessionsRequest",
    "ListGameSessionsResponse",
    "ListGameSessionsUseCase",
    "UpdateGameSessionRequest",
    "UpdateGameSessionResponse",
    "UpdateGameSessionUseCase",
]
